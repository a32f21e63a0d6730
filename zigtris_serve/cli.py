"""
Serve the zigtris web build over HTTP

With no arguments this serves ./zig-out/web on 0.0.0.0:8080.

Usage:
    zigtris-serve                        # index.html at http://localhost:8080/
    zigtris-serve --variant local        # zigtris.html at http://localhost:8080/
    zigtris-serve --root dist --port 9000
    python -m zigtris_serve --verbose    # log every request
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import VARIANTS, ServerConfig
from .errors import ZigtrisServeError
from .server import serve


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zigtris-serve",
        description="Serve the pre-built zigtris web assets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Variants:
  web    - listen on 0.0.0.0, serve index.html at /
  local  - listen on localhost, serve zigtris.html at /
        """
    )
    parser.add_argument(
        "--variant",
        choices=sorted(VARIANTS),
        default="web",
        help="Preset to start from (default: web)"
    )
    parser.add_argument(
        "--root",
        type=Path,
        help="Directory to serve (default: zig-out/web)"
    )
    parser.add_argument(
        "--host",
        help="Address to bind (default depends on variant)"
    )
    parser.add_argument(
        "--port",
        type=int,
        help="Port to listen on (default: 8080)"
    )
    parser.add_argument(
        "--index",
        help="File served for directory requests (default depends on variant)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every request to stderr"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = ServerConfig.for_variant(
            args.variant,
            root=args.root,
            host=args.host,
            port=args.port,
            index=args.index,
            verbose=args.verbose or None,
        )
    except ValueError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    try:
        serve(config)
    except ZigtrisServeError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
