# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from storeview.app import load_store_listing, update_store_rating
from storeview.config import ConfigurationError, configure_logging
from storeview.domain.errors import StoreViewError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Book store listing")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    stores = subparsers.add_parser("stores", help="Print the resolved store listing as JSON")
    stores.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: %(default)s)",
    )

    rate = subparsers.add_parser("rate", help="Update the rating of a store")
    rate.add_argument(
        "--store-id",
        type=str,
        required=True,
        help="Id of the store to rate",
    )
    rate.add_argument(
        "--rating",
        type=float,
        required=True,
        help="New rating between 0 and 5",
    )

    return parser.parse_args(list(argv))


def _print_listing(indent: int) -> bool:
    listing = load_store_listing()
    if not listing.is_available:
        log.error("No stores available at the moment: %s", listing.reason)
        return False
    print(json.dumps(listing.as_view(), indent=indent, ensure_ascii=False))
    return True


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command == "stores":
            if not _print_listing(parsed_args.indent):
                sys.exit(1)
        elif parsed_args.command == "rate":
            rating = parsed_args.rating
            update_store_rating(
                parsed_args.store_id,
                int(rating) if rating.is_integer() else rating,
            )
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)
    except StoreViewError:
        log.exception("Request failed")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    print("\nClosed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
