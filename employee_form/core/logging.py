import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "employee_form"


def configure_logging(level: str = "INFO") -> None:
    """
    Installs one stream handler on the package logger.
    Calling it again only updates the level.
    """
    logger = logging.getLogger("employee_form")
    logger.setLevel(level.upper())

    if any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        return

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
