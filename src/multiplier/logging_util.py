import logging
import sys
from typing import Final, Optional, TextIO

LOG_FORMAT: Final[str] = '%(levelname)s:%(asctime)s %(name)s %(message)s'


def init_logging(loglevel: str, stream: Optional[TextIO] = None) -> int:
    """Initialize the logging module

    The handler is bound to stderr unless another stream is given: stdout
    carries only the multiplication report. The root level is set even when
    handlers already exist, since basicConfig is then a no-op.

    :param loglevel: the logging level name to set (case-insensitive)
    :param stream: handler stream, sys.stderr by default
    :return: the numeric level applied to the root logger
    """
    numeric_level = getattr(logging, loglevel.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError('Invalid log level: %s' % loglevel)
    logging.basicConfig(
        format=LOG_FORMAT,
        level=numeric_level,
        stream=stream if stream is not None else sys.stderr,
    )
    logging.getLogger().setLevel(numeric_level)
    return numeric_level
