# core/logging_config.py

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """
    Configures root logging for the application.

    Args:
        verbose (bool): If True, DEBUG messages are emitted; otherwise INFO and above.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
