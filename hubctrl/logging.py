import functools
import logging
import sys


LOGLEVEL_TRACE = 5

# Highest value accepted by -v; it turns on transfer tracing.
MAX_VERBOSITY = 5

LOG_FORMAT_COLOR = "\u001b[37;1m%(levelname)-8s| \u001b[0m\u001b[1m%(module)-12s|\u001b[0m %(message)s"
LOG_FORMAT_PLAIN = "%(levelname)-8s| %(module)-12s| %(message)s"


def level_for_verbosity(verbose):
    """ Maps a 0 (silent) .. 5 (trace) verbosity onto a python log level. """
    verbose = max(0, min(int(verbose), MAX_VERBOSITY))
    if verbose == MAX_VERBOSITY:
        return LOGLEVEL_TRACE
    return logging.CRITICAL - (verbose * 10)


def configure_default_logging(verbose=3, stream=None):
    """
    Sets up log output for a hub-ctrl run.

    Args:
        verbose : The -v verbosity of the run.
        stream  : Where log records go; stderr by default, so they never mix with the hub listing.
    """
    if stream is None:
        stream = sys.stderr

    level = level_for_verbosity(verbose)
    log_format = LOG_FORMAT_COLOR if stream.isatty() else LOG_FORMAT_PLAIN

    logging.basicConfig(level=level, format=log_format, stream=stream)
    log.setLevel(level)
    return level


def _initialize_logging():
    # add a TRACE level to logging
    logging.TRACE = LOGLEVEL_TRACE
    logging.addLevelName(logging.TRACE, "TRACE")
    logging.Logger.trace = functools.partialmethod(logging.Logger.log, logging.TRACE)
    logging.trace = functools.partial(logging.log, logging.TRACE)

    # Quiet until a front end asks for more.
    logger = logging.getLogger("hubctrl")
    logger.level = logging.WARN

    return logger


log = _initialize_logging()
