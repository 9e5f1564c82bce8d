import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name="pathtracer", level=logging.INFO):
    """Returns a logger with a single stream handler attached."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        ch = logging.StreamHandler()
        fmt = logging.Formatter(LOG_FORMAT)
        ch.setFormatter(fmt)
        logger.addHandler(ch)
    logger.setLevel(level)
    return logger


__all__ = ["get_logger", "LOG_FORMAT"]
