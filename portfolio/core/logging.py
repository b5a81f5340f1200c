import logging
import sys
import contextvars

# Context var for correlation id
request_id_ctx_var: contextvars.ContextVar[str | None] = contextvars.ContextVar("request_id", default=None)

# attributes every LogRecord has; anything else arrived through ``extra=``
_RECORD_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime", "request_id"}

# libraries that are chatty at INFO
QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "passlib", "multipart")


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # Attach request_id (or 'none') so formatters can display it
        record.request_id = request_id_ctx_var.get() or "none"
        return True


class ExtraFieldsFormatter(logging.Formatter):
    """Append the ``extra={...}`` fields of a record as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = {k: v for k, v in vars(record).items() if k not in _RECORD_ATTRS and not k.startswith("_")}
        if not extras:
            return line
        fields = " ".join(f"{k}={v}" for k, v in sorted(extras.items()))
        return f"{line} | {fields}"


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger once: stdout, request id on every line, extras appended."""
    root = logging.getLogger()
    if root.handlers:
        # keep existing handlers (uvicorn, pytest) but ensure our filter is attached
        for h in root.handlers:
            if not any(isinstance(f, RequestIdFilter) for f in h.filters):
                h.addFilter(RequestIdFilter())
    else:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            ExtraFieldsFormatter("%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s")
        )
        handler.addFilter(RequestIdFilter())
        root.addHandler(handler)

    root.setLevel((level or "INFO").upper())
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
