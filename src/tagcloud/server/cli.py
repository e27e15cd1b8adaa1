"""CLI entry point for the tag cloud preview server."""

import argparse
import webbrowser
from pathlib import Path

import uvicorn

from ..config import CloudConfig
from ..url import is_url


def main() -> int:
    """Launch the preview server."""
    parser = argparse.ArgumentParser(
        description="Preview tag clouds in a browser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s book.txt                  # Preview top words of book.txt
  %(prog)s book.txt --port 8080      # Custom port
  %(prog)s book.txt --no-browser     # Don't open a browser
        """,
    )

    parser.add_argument("source", help="Text file or URL to preview")
    parser.add_argument("--config", type=Path, help="YAML settings file")
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to run server on (default: 8000)",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Don't open browser automatically",
    )

    args = parser.parse_args()

    if not is_url(args.source) and not Path(args.source).exists():
        print(f"Input file not found: {args.source}")
        return 1
    if args.config and not args.config.exists():
        print(f"Config file not found: {args.config}")
        return 1

    config = CloudConfig.from_yaml(args.config) if args.config else CloudConfig()

    from . import configure

    configure(source=args.source, config=config)

    url = f"http://{args.host}:{args.port}"
    if not args.no_browser:
        print(f"Opening {url} in browser...")
        webbrowser.open(url)

    print(f"Previewing {args.source} at {url}")
    uvicorn.run(
        "tagcloud.server:app",
        host=args.host,
        port=args.port,
        log_level="warning",
    )

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
