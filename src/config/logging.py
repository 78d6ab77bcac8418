import json
import logging
import sys
from typing import Literal

from core.logging_utils import redact_signature

DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


class RedactingFormatter(logging.Formatter):
    """Plain formatter that hides any ``signature=`` value in the output."""

    def format(self, record: logging.LogRecord) -> str:
        return redact_signature(super().format(record))


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    The message is serialized with :func:`json.dumps`, so API error bodies
    containing quotes still yield a parseable line. Signatures are hidden.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "level": record.levelname,
            "time": self.formatTime(record, self.datefmt),
            "name": record.name,
            "msg": redact_signature(record.getMessage()),
        }
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def setup_logging(level: str = "INFO", mode: Literal["plain", "json"] = "plain") -> None:
    """Route connector logs to stdout with a plain or JSON-line format."""
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    if mode == "json":
        formatter: logging.Formatter = JsonFormatter(datefmt=DATE_FORMAT)
    else:
        formatter = RedactingFormatter("%(asctime)s %(levelname)s %(name)s - %(message)s")

    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level.upper())
    # urllib3 is chatty at DEBUG and would print signed URLs verbatim.
    logging.getLogger("urllib3").setLevel(max(root.level, logging.INFO))
