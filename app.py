#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import argparse
import logging

from core.duration import (
    DEFAULT_SECONDS,
    MAX_SECONDS,
    SHORT_MAX_SECONDS,
    clamp_seconds,
)
from services.appearance_service import AppearanceService
from storage.db import Database
from storage.repos import AppStateRepo


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Tiny Countdown: single-screen timer")
    p.add_argument("--db", default="countdown.db", help="Preferences database (default: countdown.db)")
    p.add_argument(
        "--seconds",
        type=int,
        default=DEFAULT_SECONDS,
        help=f"Initial duration in seconds (default: {DEFAULT_SECONDS})",
    )
    p.add_argument(
        "--short",
        action="store_true",
        help=f"Limit durations to {SHORT_MAX_SECONDS} seconds instead of {MAX_SECONDS}",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    args = p.parse_args(argv)
    args.max_seconds = SHORT_MAX_SECONDS if args.short else MAX_SECONDS
    args.seconds = clamp_seconds(args.seconds, args.max_seconds)
    return args


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # tkinter is only needed once a window is opened
    from ui.main_window import MainWindow

    db = Database(db_path=args.db)
    db.init_schema()

    appearance_service = AppearanceService(AppStateRepo(db))

    try:
        app = MainWindow(
            appearance_service,
            target_seconds=args.seconds,
            max_seconds=args.max_seconds,
        )
        app.run()
    finally:
        db.close()


if __name__ == "__main__":
    main()
