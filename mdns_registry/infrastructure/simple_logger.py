"""Console logging for registration builds.

A build logs at most a handful of events:

* debug: the host derived from the local address, the generated instance
  token, and the fallback address used when the local lookup fails
* info: the descriptor that was built, with its name, id, host and port
* warning: a failed build, with the offending field and message

The keyword context of each event travels on the log record as ``extra``
and is echoed after the message by the console formatter.
"""

import logging
from typing import Any

from ..ports.logger import LoggerPort

CONTEXT_KEYS = ("service_name", "instance_id", "host", "port", "token", "field", "error")


class RegistrationFormatter(logging.Formatter):
    """Formatter appending known registration context as ``key=value`` pairs."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = [f"{key}={getattr(record, key)}" for key in CONTEXT_KEYS if hasattr(record, key)]
        if context:
            line = f"{line} [{' '.join(context)}]"
        return line


class SimpleLogger(LoggerPort):
    """LoggerPort over a named standard library logger.

    A console handler with ``RegistrationFormatter`` is installed only when
    the named logger has no handlers yet, so applications that configure
    logging themselves keep their own output.
    """

    def __init__(self, name: str = "mdns_registry", level: int = logging.INFO):
        """Initialize the logger.

        Args:
            name: Logger name (default: "mdns_registry")
            level: Logging level (default: INFO)
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)

        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(RegistrationFormatter())
            self._logger.addHandler(handler)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(message, extra=kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(message, extra=kwargs)
