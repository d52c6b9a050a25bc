"""
QuadCalc Web Portal Launcher
Simple script to start the web server
"""
import sys
import os

# Add current directory to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

print("Starting QuadCalc Web Portal...")
print()

try:
    import config
    from api import app
except ImportError as e:
    print(f"Error importing modules: {e}")
    print("\nMake sure you have installed the required dependencies:")
    print("  pip install -e .")
    sys.exit(1)

print(f"Server starting on http://{config.WEB_HOST}:{config.WEB_PORT}")
try:
    app.run(host=config.WEB_HOST, port=config.WEB_PORT, debug=False, threaded=False)
except OSError as e:
    print(f"Error starting server: {e}")
    print("\nTroubleshooting:")
    print("1. Check if another application is using the port")
    print("2. Change WEB_PORT in config.py")
    sys.exit(1)
