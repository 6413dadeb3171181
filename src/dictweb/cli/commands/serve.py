"""
Serve command.
"""

import uvicorn

from dictweb.config import get_settings


def add_subparser(subparsers):
    parser = subparsers.add_parser("serve", help="Run the web server")
    parser.add_argument("--host", help="Bind address (default: $DICTWEB_HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, help="Port (default: $DICTWEB_PORT or 8080)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    parser.set_defaults(func=serve)


def serve(args):
    settings = get_settings()
    uvicorn.run(
        "dictweb.server.main:create_app",
        factory=True,
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload,
    )
