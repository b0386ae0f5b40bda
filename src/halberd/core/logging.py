import logging
from typing import Any

# Attributes every LogRecord has; anything else on a record came from extra=
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def _fmt_val(val: Any) -> str:
    s = str(val)
    if not s or " " in s or "=" in s or '"' in s:
        s = '"' + s.replace('"', '\\"') + '"'
    return s


class LogfmtFormatter(logging.Formatter):
    """
    logfmt line: level, logger and event, then the record's extras in the
    order they were passed (rel=, count=, format=, ...).
    """

    def format(self, record: logging.LogRecord) -> str:
        pairs = [
            ("level", record.levelname.lower()),
            ("logger", record.name),
            ("event", record.getMessage()),
        ]
        pairs.extend(
            (key, val)
            for key, val in vars(record).items()
            if key not in _RECORD_ATTRS and val is not None
        )
        if record.exc_info:
            pairs.append(("exc_type", record.exc_info[0].__name__))
        return " ".join(f"{key}={_fmt_val(val)}" for key, val in pairs)


def setup_logging(level: str = "INFO") -> None:
    """Send halberd's records to stderr as logfmt, replacing existing root handlers."""
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler()
    handler.setFormatter(LogfmtFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


__all__ = ["setup_logging", "LogfmtFormatter"]
