"""Logger setup shared by the engine and its collaborators.

`setup_logger` never adds a second handler to the same logger, so repeated
calls do not duplicate output.
"""
import logging


def setup_logger(name: str = "collateral_model", level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)

    has_stream = any(isinstance(h, logging.StreamHandler) for h in logger.handlers)
    if not has_stream:
        ch = logging.StreamHandler()
        fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s - %(message)s")
        ch.setFormatter(fmt)
        logger.addHandler(ch)

    return logger
