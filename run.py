"""
JsDoc Entry Point - Start the JsDoc server
Run with: python run.py
"""

from server.app import create_app

app = create_app()

if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5000)
