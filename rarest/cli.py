"""Command-line entrypoint.

Usage:
    rarest serve --port 8000
    rarest extract-manifest world_content.json --out data/manifest
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rarest.core import ManifestFormatError
from rarest.data import CorpusConfig, extract_manifest, load_world_content, write_manifest

logger = logging.getLogger(__name__)


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run(
        "rarest.web.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
    )
    return 0


def _extract_manifest(args: argparse.Namespace) -> int:
    out_dir = args.out or CorpusConfig().manifest_dir
    try:
        manifest = extract_manifest(load_world_content(args.world_content))
    except ManifestFormatError as exc:
        logger.error("[Manifest] %s", exc)
        return 1
    collectibles_path, records_path = write_manifest(manifest, out_dir)
    print(f"Saved {len(manifest.collectibles)} collectibles to {collectibles_path}")
    print(f"Saved {len(manifest.records)} records to {records_path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rarest", description="Destiny 2 rarest-items service")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1", help="Host to bind to (default: 127.0.0.1)")
    serve.add_argument("--port", type=int, default=8000, help="Port to listen on (default: 8000)")
    serve.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    serve.add_argument(
        "--log-level",
        default="info",
        choices=["debug", "info", "warning", "error"],
        help="Log level (default: info)",
    )
    serve.set_defaults(handler=_serve)

    extract = sub.add_parser(
        "extract-manifest",
        help="Reduce a downloaded world-content JSON to collectibles.json and records.json",
    )
    extract.add_argument("world_content", type=Path, help="Path to the world-content JSON file")
    extract.add_argument("--out", type=Path, default=None, help="Output directory (default: <data dir>/manifest)")
    extract.set_defaults(handler=_extract_manifest)

    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    args = build_parser().parse_args(argv)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
