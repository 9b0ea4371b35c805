import logging

from .config import get_log_level


def get_logger(name: str) -> logging.Logger:
    """Configure un logger standardisé avec un niveau selon l'environnement (LOG_LEVEL)"""
    log_level = get_log_level()

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(log_level)

        logger.debug("Logger initialized for '%s' with level=%s", name, log_level)
    return logger
