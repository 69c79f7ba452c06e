"""
Logging Configuration
=====================
tinygeo is a library: the package logger only carries a NullHandler (see
``tinygeo/__init__.py``) and stays silent unless an application opts in.

``setup_logging`` is that opt-in for scripts such as the demo program. It
sends the ``tinygeo`` namespace to stderr so diagnostics never mix with
what a program prints on stdout.
"""
import logging
import sys


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Attach a stderr handler to the 'tinygeo' namespace logger.

    Calling it again replaces the previous handler instead of stacking a
    second one.

    Args:
        level: Logging level (e.g. logging.DEBUG to see every Vector
            specialisation as it is created).

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("tinygeo")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    # Format: Time - Module - Level - Message
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    logger.addHandler(handler)

    logger.debug(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
