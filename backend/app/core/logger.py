import logging
import os
from logging.handlers import RotatingFileHandler
from app.core.config import settings

class LoggerConfig:
    """
    Logger configuration class to setup logging for the application.
    """
    def __init__(
        self, env=20, logger_name="WanderMode", log_directory="logs", log_file="app.log"
    ):
        self.logger_name = logger_name
        self.log_directory = os.path.abspath(log_directory)
        self.log_file_path = os.path.join(self.log_directory, log_file)
        self.env = env
        self.log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

        self.logger = logging.getLogger(self.logger_name)
        self.setup_logger()

    def setup_logger(self):
        # Avoid adding duplicate handlers if re-initialized
        if self.logger.hasHandlers():
            self.logger.setLevel(self.env)
            return

        formatter = logging.Formatter(self.log_format)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(self.env)
        console_handler.setFormatter(formatter)
        self.logger.addHandler(console_handler)

        try:
            os.makedirs(self.log_directory, exist_ok=True)
            file_handler = RotatingFileHandler(
                self.log_file_path, backupCount=5, maxBytes=1024 * 1024 * 10, encoding="utf-8"
            )
            file_handler.setLevel(self.env)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
        except OSError as e:
            self.logger.warning(f"File logging disabled, cannot write to {self.log_file_path}: {e}")

        self.logger.setLevel(self.env)

    def log(self, level: int, message: str, extra: dict = None):
        """Simple wrapper to log messages"""
        if extra:
            message = f"{message} | {extra}"
        self.logger.log(level, message)

# Initialize Logger
logs = LoggerConfig(
    env=settings.LOGGER,
    logger_name="WANDER-BE",
    log_directory="logs",
    log_file="app.log"
)
