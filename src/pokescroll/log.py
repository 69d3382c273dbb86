import sys

from loguru import logger


def setup_logging(log_file: str | None = None, level: str = "INFO", *, to_stderr: bool = False) -> None:
    """Route loguru output to a file.

    The TUI owns the terminal, so the default stderr sink is dropped unless
    ``to_stderr`` is set (the proxy server keeps it).
    """
    logger.remove()
    if to_stderr:
        logger.add(sys.stderr, level=level)
    if log_file:
        logger.add(log_file, level=level, rotation="5 MB", retention=3, enqueue=False)
