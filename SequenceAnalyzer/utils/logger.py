import logging
import sys

PACKAGE_LOGGER = "SequenceAnalyzer"


class ConsoleFormatter(logging.Formatter):
    def format(self, record):
        record.message = record.getMessage()
        return f"[{record.levelname}] {record.message}"


# One stdout handler on the package logger; module loggers only propagate to it
def get_logger(name):
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not package_logger.handlers:
        package_logger.setLevel(logging.DEBUG)
        package_logger.propagate = False
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.INFO)
        handler.setFormatter(ConsoleFormatter())
        package_logger.addHandler(handler)
    return logging.getLogger(name)
