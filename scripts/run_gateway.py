"""Launch the worker gateway API with routes loaded from a YAML file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Final

import uvicorn

DEFAULT_ROUTES_FILE: Final[Path] = Path("./config/routes.yaml")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the worker gateway locally.")
    parser.add_argument("--host", default=None, help="Bind address (overrides settings/env).")
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind to (overrides settings/env).",
    )
    parser.add_argument(
        "--routes",
        type=Path,
        default=DEFAULT_ROUTES_FILE,
        help="YAML file declaring the routes mapped to worker actions.",
    )
    parser.add_argument(
        "--sync-code",
        action="store_true",
        help="Push the configured action code to the workers on startup.",
    )
    parser.add_argument(
        "--log-level",
        choices=["critical", "error", "warning", "info", "debug"],
        default=None,
        help="Log level for gateway and uvicorn output (overrides settings/env).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()

    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))

    # Import after sys.path is adjusted
    from worker_adapter.bootstrap import ServiceContainer
    from worker_adapter.config import get_settings
    from worker_adapter.http import create_app, load_routes

    settings = get_settings()
    host = args.host or settings.host
    port = args.port or settings.port
    log_level = (args.log_level or settings.log_level).lower()
    root_level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(level=root_level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    for logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(logger_name).setLevel(root_level)

    routes = load_routes(args.routes) if args.routes.is_file() else []
    if not routes:
        logging.getLogger(__name__).warning("No routes loaded from %s", args.routes)

    container = ServiceContainer.from_settings(settings)
    app = create_app(container, routes, sync_on_startup=args.sync_code)

    uvicorn.run(app, host=host, port=port, log_level=log_level, log_config=None)


if __name__ == "__main__":
    main()
