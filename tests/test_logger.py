import logging

from boxoffice.utils.logger import setup_logging


def test_setup_logging_returns_package_logger():
    logger = setup_logging("debug")

    assert logger.name == "boxoffice"
    assert logging.getLogger("urllib3").level == logging.WARNING
