#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse
import logging
import sys

from textual.theme import BUILTIN_THEMES

from .app import NewsApp
from .config import BASE_URL, DEFAULT_THEME, load_config, setup_logging
from .fetcher import HackerNewsClient
from .headless import run_once

logger = logging.getLogger("hn")


# --- Entrypoint ---
def main() -> None:
    parser = argparse.ArgumentParser(description="Hacker News top stories in the terminal")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--theme",
        type=str,
        help=f"Set theme for this run. Available: {', '.join(sorted(BUILTIN_THEMES))}",
    )
    parser.add_argument(
        "--once", action="store_true", help="Print the top stories and exit instead of starting the UI"
    )
    args = parser.parse_args()

    debug_path = setup_logging(args.debug)
    if debug_path:
        print(f"Debug logging enabled: {debug_path}", file=sys.stderr)

    config = load_config()
    theme_name = args.theme or config.get("theme") or DEFAULT_THEME

    if theme_name not in BUILTIN_THEMES:
        print(f"Theme '{theme_name}' not found, falling back to {DEFAULT_THEME}.", file=sys.stderr)
        theme_name = DEFAULT_THEME

    logger.info("Using theme: %s", theme_name)

    client = HackerNewsClient(
        base_url=config.get("base_url", BASE_URL),
        timeout=config.get("timeout"),
    )

    if args.once:
        run_once(client)
        return

    try:
        app = NewsApp(client=client, theme=theme_name, config=config)
        app.run()
    except Exception as e:
        logger.exception("Application crashed: %s", e)
        print(f"Application crashed: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
