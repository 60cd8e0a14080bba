"""Small helpers shared by the command line front-ends."""

from __future__ import annotations

import logging


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s:%(name)s:%(message)s")


def parse_time(text: str) -> int:
    """
    Parse a user-typed time ('1330' or '13:30') into 'hundreds' notation.
    Raises ValueError if the text is not a number.
    """
    return int(text.strip().replace(":", ""))
