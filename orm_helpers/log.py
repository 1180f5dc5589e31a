import logging

import structlog


def get_logger(name):
    """structlog logger that emits through the stdlib ``logging`` hierarchy.

    Levels and handlers are left to the application.
    """
    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger)
