from __future__ import annotations

import logging


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    # sdk debug records (builder/codec) only with -v
    logging.getLogger("verify_sdk").setLevel(level)
