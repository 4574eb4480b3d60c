import logging
import sys

_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None)))


class _ContextFormatter(logging.Formatter):
    """Appends ``key=value`` pairs passed through ``extra`` to the message."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = {
            key: value
            for key, value in vars(record).items()
            if key not in _RESERVED_ATTRS and key not in ("message", "asctime")
        }
        if not context:
            return message
        pairs = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
        return f"{message} | {pairs}"


class Log:
    """Process-wide logger facade for the composition pipeline."""

    _logger: logging.Logger = logging.getLogger("pdfcover")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach a single stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                _ContextFormatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **context: object) -> None:
        cls._logger.info(message, extra=context)

    @classmethod
    def error(cls, message: str, **context: object) -> None:
        cls._logger.error(message, extra=context)

    @classmethod
    def warning(cls, message: str, **context: object) -> None:
        cls._logger.warning(message, extra=context)

    @classmethod
    def debug(cls, message: str, **context: object) -> None:
        cls._logger.debug(message, extra=context)
