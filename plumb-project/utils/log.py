# What it does: Sets up logging for the command line tool
# How it does: Installs one stream handler on the root logger that writes to stderr, so log lines never mix with object bytes written to stdout

import logging
import sys

LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'


def configure_logging(log_level='WARNING'):
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())
