"""Run the site on Werkzeug's server without a `Server` response header.

Run from the project root:
  python serve.py

Then open http://localhost:3000 in your browser.
"""
from werkzeug.serving import WSGIRequestHandler, run_simple
import os

DEFAULT_HOST = '127.0.0.1'
DEFAULT_PORT = 3000


def get_host():
    return os.environ.get('SITE_HOST', DEFAULT_HOST)


def get_port():
    return int(os.environ.get('PORT', DEFAULT_PORT))


class QuietRequestHandler(WSGIRequestHandler):
    """Request handler that never announces the server software or version."""

    def version_string(self):
        return ''

    def send_header(self, keyword, value):
        if keyword.lower() == 'server':
            return
        super().send_header(keyword, value)


def run(app, host=None, port=None, debug=False):
    host = host or get_host()
    port = port or get_port()
    print(f"Serving {app.extensions['asset_store'].root} at http://{host}:{port}")
    try:
        run_simple(host, port, app, use_reloader=debug, use_debugger=debug,
                   threaded=True, request_handler=QuietRequestHandler)
    except KeyboardInterrupt:
        print('\nServer stopped')


if __name__ == '__main__':
    from app import create_app
    run(create_app())
