import logging
import sys

# verbosity 0-4 as accepted by every cli command
logging_verboseLevel = [
    logging.CRITICAL,
    logging.ERROR,
    logging.WARNING,
    logging.INFO,
    logging.DEBUG,
]

def verbosity_to_level(verbosity: int) -> int:
    return logging_verboseLevel[max(0, min(4, verbosity))]

def setup_cli_logging(verbosity):
    """Log to stderr so stdout only carries command results."""

    if verbosity > 3: # high verbose mode
        format_str = '[%(name)s] %(levelname)s: %(message)s'
    else: # low verbose mode
        format_str = '[VERSYNC] %(message)s'
    logging.basicConfig(
        level=verbosity_to_level(verbosity),
        format=format_str,
        stream=sys.stderr,
        force=True
    )

def get_logger(name, verbosity=None):
    logger = logging.getLogger(name)
    if verbosity is not None:
        logger.setLevel(verbosity_to_level(verbosity))
    return logger
