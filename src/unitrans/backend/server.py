"""Development server for the translation proxy."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from unitrans.backend.app import create_app
from unitrans.backend.config.settings import ProxySettings
from unitrans.shared.log_levels import LOG_LEVELS, log_level_from_env


def _build_parser(settings: ProxySettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the translation proxy locally")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    parser.add_argument("--debug", action="store_true", help="Enable the Flask debugger")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=log_level_from_env("INFO"),
        help="Logging level (default: %(default)s)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    settings = ProxySettings.from_env()
    args = _build_parser(settings).parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(settings)
    logging.getLogger(__name__).info(
        "Translation server running on http://%s:%d", args.host, args.port
    )
    app.run(host=args.host, port=args.port, debug=args.debug)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
