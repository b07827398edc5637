"""Desktop entrypoint: configure logging and start the game."""

from __future__ import annotations

import logging

import config


def _configure_logging() -> None:
    level = getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _run_desktop() -> None:
    from game import main as game_main

    game_main()


def run() -> None:
    _configure_logging()
    _run_desktop()


if __name__ == "__main__":
    run()
