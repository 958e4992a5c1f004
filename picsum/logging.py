import logging

from typing import Optional

def setup_logger(level: Optional[str] = None):
    logger = logging.getLogger("picsum")

    if level:
        logger.setLevel(level.upper())
    elif logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)

    if not logger.handlers:
        formatter = logging.Formatter(fmt='%(asctime)s - %(levelname)s - %(module)s - %(message)s')

        handler = logging.StreamHandler()

        handler.setFormatter(formatter)

        logger.addHandler(handler)

    return logger
