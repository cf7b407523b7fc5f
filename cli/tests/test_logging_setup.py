import logging

from verify_cli.logging_ import setup_logging


def test_setup_logging_follows_verbose_flag() -> None:
    setup_logging(True)
    assert logging.getLogger("verify_sdk").level == logging.DEBUG
    setup_logging(False)
    assert logging.getLogger("verify_sdk").level == logging.WARNING
