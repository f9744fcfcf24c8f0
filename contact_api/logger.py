import logging
import sys


logging_formatter = logging.Formatter("[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s")


def configure_logging(level: str) -> None:
    logging.getLogger(__package__).setLevel(level)


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging_formatter)
        logger.addHandler(handler)
    return logger
