"""CLI entrypoint for the bootcamp site.

Usage:
    python -m main serve --port 3000
    python -m main assets
    python -m main health
"""
import argparse
import json

from app import create_app
from serve import run


def cmd_serve(args):
    app = create_app(args.web_dir)
    run(app, host=args.host, port=args.port, debug=args.debug)


def cmd_assets(args):
    app = create_app(args.web_dir)
    store = app.extensions['asset_store']
    if not len(store):
        print(f"No assets found under {store.root}")
        return
    for a in store:
        print(f"/{a.path}  {a.content_type}  {len(a.content)} bytes")


def cmd_health(args):
    app = create_app(args.web_dir)
    resp = app.test_client().get('/health')
    print(json.dumps(resp.get_json(), indent=2))


def build_parser():
    parser = argparse.ArgumentParser(prog="site", description="DevOps Bootcamp static site")
    parser.add_argument("--web-dir", default=None, help="Asset root (defaults to SITE_WEB_DIR or ./web)")
    sub = parser.add_subparsers(dest="cmd")

    p_serve = sub.add_parser("serve", help="Run the HTTP server")
    p_serve.add_argument("--host", default=None, help="Bind address (defaults to SITE_HOST or 127.0.0.1)")
    p_serve.add_argument("--port", type=int, default=None, help="Port (defaults to PORT or 3000)")
    p_serve.add_argument("--debug", action="store_true", help="Enable reloader and debugger")
    p_serve.set_defaults(func=cmd_serve)

    p_assets = sub.add_parser("assets", help="List served assets")
    p_assets.set_defaults(func=cmd_assets)

    p_health = sub.add_parser("health", help="Print a health status document")
    p_health.set_defaults(func=cmd_health)
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return
    try:
        args.func(args)
    except Exception as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
