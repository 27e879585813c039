import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_NAME = "vidly"


def configure_logging(level: str = "INFO") -> None:
    """Attach the service handler to the root logger once and set its level."""

    root = logging.getLogger()
    if not any(handler.get_name() == _HANDLER_NAME for handler in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)

    root.setLevel(level.upper())


__all__ = ["configure_logging"]
