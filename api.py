"""
Flask REST API for ProCalc Web Portal
Exposes the calculator keypad as JSON endpoints
"""
import logging
from flask import Flask, jsonify, request
from flask_cors import CORS
from calculator import CalculatorSession
import config

logger = logging.getLogger(__name__)


def create_app(session=None):
    """Build the Flask app around a single calculator session"""
    app = Flask(__name__)
    CORS(app)  # Enable CORS for all routes
    app.config["SESSION"] = session or CalculatorSession()

    def current_session():
        return app.config["SESSION"]

    def _field(name):
        payload = request.get_json(silent=True) or {}
        if not isinstance(payload, dict):
            raise ValueError("Request body must be a JSON object")
        value = payload.get(name)
        if value is None or value == "":
            raise ValueError(f"Missing '{name}' in request body")
        return str(value)

    @app.route('/api')
    def api_info():
        """API information page"""
        return f"""
        <html>
        <head><title>{config.APP_NAME} API</title></head>
        <body style="font-family: Arial; padding: 40px; background: #1a1a2e; color: white;">
            <h1>{config.APP_NAME} API Server</h1>
            <p>Version {config.VERSION}</p>
            <h2>Available Endpoints:</h2>
            <ul>
                <li><a href="/api/display" style="color: #2196F3;">GET /api/display</a> - Current display</li>
                <li>POST /api/press - Press a keypad button, body: {{"button": "7"}}</li>
                <li>POST /api/key - Send a keyboard key, body: {{"key": "Enter"}}</li>
                <li>POST /api/clear - Clear all</li>
            </ul>
        </body>
        </html>
        """

    @app.route('/api/display')
    def get_display():
        """Get the current expression and result lines"""
        try:
            return jsonify({'success': True, 'data': current_session().render().to_dict()})
        except Exception as e:
            logger.exception("Failed to render display")
            return jsonify({'success': False, 'error': str(e)}), 500

    @app.route('/api/press', methods=['POST'])
    def press_button():
        """Press a keypad button"""
        try:
            display = current_session().press(_field('button'))
            return jsonify({'success': True, 'data': display.to_dict()})
        except ValueError as e:
            return jsonify({'success': False, 'error': str(e)}), 400
        except Exception as e:
            logger.exception("Button press failed")
            return jsonify({'success': False, 'error': str(e)}), 500

    @app.route('/api/key', methods=['POST'])
    def press_key():
        """Send a keyboard key"""
        try:
            display = current_session().handle_key(_field('key'))
            return jsonify({'success': True, 'data': display.to_dict()})
        except ValueError as e:
            return jsonify({'success': False, 'error': str(e)}), 400
        except Exception as e:
            logger.exception("Key press failed")
            return jsonify({'success': False, 'error': str(e)}), 500

    @app.route('/api/clear', methods=['POST'])
    def clear_all():
        """Reset the calculator"""
        try:
            return jsonify({'success': True, 'data': current_session().clear_all().to_dict()})
        except Exception as e:
            logger.exception("Clear failed")
            return jsonify({'success': False, 'error': str(e)}), 500

    return app


def run():
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    app = create_app()

    print("\n" + "="*60)
    print(f"{config.APP_NAME} Web Portal API Server")
    print("="*60)
    print(f"Server starting on http://{config.WEB_HOST}:{config.WEB_PORT}")
    print(f"Access from this device: http://localhost:{config.WEB_PORT}/api")
    if config.WEB_HOST == '0.0.0.0':
        print(f"Access from network: http://<your-ip>:{config.WEB_PORT}/api")
    print("="*60 + "\n")

    # One request at a time, like key presses on a keypad
    app.run(host=config.WEB_HOST, port=config.WEB_PORT, debug=False, threaded=False)


if __name__ == '__main__':
    run()
