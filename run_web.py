"""
ProCalc Web Portal Launcher
Starts the calculator API server from a source checkout
"""
import sys
import os

# Add current directory to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

try:
    import api
except ImportError as e:
    print(f"Error importing modules: {e}")
    print("\nInstall the project and its dependencies first:")
    print("  pip install -e .")
    sys.exit(1)

if __name__ == "__main__":
    try:
        api.run()
    except OSError as e:
        print(f"Could not start the server on port {api.config.WEB_PORT}: {e}")
        print("Set WEB_PORT in config.py to a free port.")
        sys.exit(1)
