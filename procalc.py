"""
ProCalc Calculator
Main application entry point
"""
import tkinter as tk
import subprocess
import sys
import os
import socket
import atexit
import logging
import config
from gui import ProCalcGUI

logger = logging.getLogger(__name__)

# Child process serving the web portal, if started
api_process = None

def get_local_ip():
    try:
        s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        # doesn't even have to be reachable
        s.connect(('10.255.255.255', 1))
        IP = s.getsockname()[0]
        s.close()
    except OSError:
        IP = '127.0.0.1'
    return IP

def start_api_server():
    """Start the Flask API server in a separate process"""
    global api_process
    try:
        script_dir = os.path.dirname(os.path.abspath(__file__))
        api_path = os.path.join(script_dir, 'api.py')

        api_process = subprocess.Popen(
            [sys.executable, api_path],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            creationflags=subprocess.CREATE_NEW_CONSOLE if sys.platform == 'win32' else 0
        )
        ip = get_local_ip()
        logger.info("API server started (PID: %s)", api_process.pid)
        print("="*60)
        print(f"{config.APP_NAME} WEB PORTAL IS LIVE")
        print(f"Access on this PC:    http://localhost:{config.WEB_PORT}/api")
        print(f"Access on your Phone: http://{ip}:{config.WEB_PORT}/api")
        print("="*60)
    except OSError as e:
        logger.error("Failed to start API server: %s", e)

def cleanup_api_server():
    """Terminate the API server when the main application exits"""
    global api_process
    if api_process:
        try:
            api_process.terminate()
            api_process.wait(timeout=5)
            logger.info("API server stopped")
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.error("Error stopping API server: %s", e)
        api_process = None

def main():
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    if config.START_WEB_PORTAL:
        start_api_server()
        atexit.register(cleanup_api_server)

    root = tk.Tk()
    app = ProCalcGUI(root)
    root.mainloop()

    cleanup_api_server()

if __name__ == "__main__":
    main()
