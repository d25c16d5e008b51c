import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def configure_logging(level: int = None) -> logging.Logger:
    """Console logging for the wander_client package. Safe to call on every Streamlit rerun."""
    if level is None:
        level = int(os.getenv("LOGGER", "20"))

    logger = logging.getLogger("wander_client")
    # Only our own handlers count; the root logger may already have some
    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)
    for handler in logger.handlers:
        handler.setLevel(level)
    logger.setLevel(level)
    return logger
