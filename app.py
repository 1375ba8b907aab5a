"""Flask static file server for the DevOps Bootcamp showcase site.

Run:
  pip install -r requirements.txt
  python app.py

Serves the files under `web/` plus a JSON health check at `/health`. Anything
that isn't an asset gets the `404.html` page with a 404 status.
"""
from flask import Flask, Response, jsonify, request
from datetime import datetime, timezone
import time

from assets import AssetStore, HTML_CONTENT_TYPE

# headers that would tell a client what is serving the site
HIDDEN_HEADERS = ('Server', 'X-Powered-By')


def _asset_response(asset, status=200):
    return Response(asset.content, status=status, content_type=asset.content_type)


def create_app(web_dir=None):
    """Build the site app for the asset root `web_dir` (defaults to SITE_WEB_DIR or `web/`)."""
    # static_folder=None: assets are served from the preloaded store only
    app = Flask(__name__, static_folder=None)

    store = AssetStore(web_dir)
    started = time.monotonic()
    app.extensions['asset_store'] = store

    def not_found():
        return Response(store.not_found.content, status=404, content_type=HTML_CONTENT_TYPE)

    @app.route('/')
    def index():
        page = store.index
        if page is None:
            return not_found()
        return _asset_response(page)

    @app.route('/health')
    def health():
        now = datetime.now(timezone.utc)
        return jsonify({
            'status': 'OK',
            'timestamp': now.isoformat(timespec='milliseconds').replace('+00:00', 'Z'),
            'uptime': max(time.monotonic() - started, 0.0),
        })

    @app.route('/<path:asset_path>')
    def asset(asset_path):
        try:
            found = store.get(asset_path)
        except Exception:
            app.logger.exception("asset lookup failed for %r", asset_path)
            found = None
        if found is None:
            return not_found()
        return _asset_response(found)

    @app.errorhandler(404)
    def page_not_found(e):
        return not_found()

    @app.after_request
    def strip_and_log(response):
        for name in HIDDEN_HEADERS:
            response.headers.pop(name, None)
        # werkzeug already writes an access line when serving
        app.logger.debug("%s %s -> %s", request.method, request.path, response.status_code)
        return response

    return app


if __name__ == '__main__':
    from serve import run
    run(create_app())
