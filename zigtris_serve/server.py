"""Create and run the HTTP server for a ServerConfig."""

import http.server

from .config import ServerConfig, resolve_root
from .errors import ServerStartError
from .handler import make_handler


class AssetServer(http.server.ThreadingHTTPServer):
    """One thread per request, with room for a page's burst of asset fetches."""
    request_queue_size = 128


def create_server(config: ServerConfig) -> AssetServer:
    """Bind a threaded HTTP server for ``config``.

    Raises ServerStartError if the address cannot be bound.
    """
    try:
        return AssetServer((config.host, config.port), make_handler(config))
    except OSError as e:
        raise ServerStartError(f"Could not bind {config.host}:{config.port}: {e.strerror or e}") from e


def serve(config: ServerConfig) -> None:
    """Serve ``config.root`` until interrupted."""
    config = resolve_root(config)
    if not config.root.is_dir():
        raise ServerStartError(f"Asset directory not found at {config.root}")

    httpd = create_server(config)
    with httpd:
        print(f"Serving {config.root} at {config.display_url}")
        print("Press Ctrl+C to stop")
        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            print("\nShutting down server...")
