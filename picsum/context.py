import os

from picsum.errors import ConfigurationError
from picsum.logging import setup_logger

DEFAULT_BASE_URL = "https://picsum.photos"
DEFAULT_TIMEOUT = 30.0

class PicsumContext:
    def __init__(self):
        log_level = os.getenv("PICSUM_LOG_LEVEL")

        try:
            self.logger = setup_logger(log_level)
        except ValueError as e:
            raise ConfigurationError(f"Invalid PICSUM_LOG_LEVEL={log_level}") from e

        self.base_url = os.getenv("PICSUM_BASE_URL", DEFAULT_BASE_URL).rstrip("/")

        timeout = os.getenv("PICSUM_TIMEOUT", DEFAULT_TIMEOUT)

        try:
            self.timeout = float(timeout)
        except ValueError as e:
            raise ConfigurationError(f"Invalid PICSUM_TIMEOUT={timeout}") from e
