from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from textual.logging import TextualHandler

from .app import RacerApp
from .config import SessionConfig, load_config


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="letter-racer", description="Catch-line typing trainer.")
    parser.add_argument("--demo", action="store_true", help="watch an automated demo session")
    parser.add_argument("--config", type=Path, default=None, help="path to a JSON config file")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> SessionConfig:
    config = SessionConfig.from_mapping(load_config(args.config))
    if args.demo:
        # the demo keeps its own pacing; only look-and-feel comes from the file
        return replace(
            SessionConfig.demo(),
            theme=config.theme,
            themes=config.themes,
            log_level=config.log_level,
        )
    return config


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    config = build_config(args)
    logging.basicConfig(level=config.logging_level, handlers=[TextualHandler()])
    RacerApp(config, demo=args.demo).run()


if __name__ == "__main__":
    main()
