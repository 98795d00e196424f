from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s  %(name)s  %(levelname)s  %(message)s"


def configure_logging(debug: bool = False, force: bool = True) -> None:
    """Send log records to stderr; comparer decisions are only shown with *debug*.

    The CLI owns its process and replaces any existing root handlers.  Pass
    ``force=False`` when embedded, so handlers installed by the host stay.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=force,
    )
