"""
Flask REST API for the QuadCalc Web Portal
Drives a calculator session over JSON endpoints
"""
from flask import Flask, jsonify, request
from flask_cors import CORS
from calculator import Calculator
from controller import CalculatorController
from history_manager import HistoryManager
import config


def create_app(controller=None):
    """Build the portal app around a controller (a fresh session by default)"""
    if controller is None:
        controller = CalculatorController(Calculator(), HistoryManager())

    app = Flask(__name__)
    CORS(app)  # Enable CORS for all routes

    def state_response(status=200):
        state = controller.snapshot()
        return jsonify({
            'success': True,
            'data': {
                'primary': state.primary,
                'secondary': state.secondary,
                'error': state.error
            }
        }), status

    @app.route('/api')
    def api_info():
        """API information"""
        return jsonify({
            'name': config.APP_NAME,
            'version': config.VERSION,
            'endpoints': ['/api/state', '/api/press', '/api/clear', '/api/calculations']
        })

    @app.route('/api/state')
    def get_state():
        """Get the two display strings and the error flag"""
        return state_response()

    @app.route('/api/press', methods=['POST'])
    def press():
        """Press a calculator button, e.g. {"key": "7"}"""
        payload = request.get_json(silent=True)
        key = payload.get('key') if isinstance(payload, dict) else None
        if not isinstance(key, str) or not key:
            return jsonify({'success': False, 'error': "Missing 'key'"}), 400
        try:
            controller.press(key)
        except KeyError:
            return jsonify({'success': False, 'error': f"Unknown key: {key}"}), 400
        return state_response()

    @app.route('/api/clear', methods=['POST'])
    def clear():
        """Reset the calculator (AC)"""
        controller.press('AC')
        return state_response()

    @app.route('/api/calculations')
    def get_calculations():
        """Get calculation history"""
        try:
            limit = int(request.args.get('limit', 50))
        except ValueError:
            return jsonify({'success': False, 'error': "'limit' must be an integer"}), 400

        history = controller.history
        calculations = history.get_calculation_history(limit) if history is not None else []

        formatted = []
        for expression, result, timestamp in calculations:
            formatted.append({
                'expression': expression,
                'result': result,
                'timestamp': timestamp
            })

        return jsonify({
            'success': True,
            'data': formatted,
            'count': len(formatted)
        })

    @app.errorhandler(Exception)
    def handle_error(e):
        code = getattr(e, 'code', 500)
        if not isinstance(code, int):
            code = 500
        return jsonify({'success': False, 'error': str(e)}), code

    return app


app = create_app()


if __name__ == '__main__':
    print("\n" + "="*60)
    print(f"{config.APP_NAME} Web Portal API Server")
    print("="*60)
    print(f"Server starting on http://{config.WEB_HOST}:{config.WEB_PORT}")
    print(f"Access from this device: http://localhost:{config.WEB_PORT}")
    if config.WEB_HOST == '0.0.0.0':
        print(f"Access from network: http://<your-ip>:{config.WEB_PORT}")
    print("="*60 + "\n")

    # One calculator session, so requests are served one at a time
    app.run(host=config.WEB_HOST, port=config.WEB_PORT, debug=False, threaded=False)
