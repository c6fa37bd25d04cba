"""
Consignment booking entry point.

Runs the booking form in the terminal against a JSON file in the
working directory, or plays a scripted scenario against throwaway
in-memory storage.

Usage:
    Interactive:  python main.py
    Custom file:  python main.py --storage /tmp/bookings.json
    Scenario:     python main.py --scenario full-day
"""

import argparse
import logging

from consignment_booking.config import settings

logger = logging.getLogger(__name__)


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=settings.business_name)
    parser.add_argument(
        "--storage",
        default=settings.storage.path,
        help="JSON file holding the persisted bookings",
    )
    parser.add_argument(
        "--scenario",
        help="play a scripted session against in-memory storage",
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    from console_form import build_console

    args = _parse_args(argv)
    if args.scenario:
        build_console(in_memory=True).run_scenario(args.scenario)
        return

    logger.info("Using storage file %s", args.storage)
    build_console(storage_path=args.storage).run()


if __name__ == "__main__":
    main()
