import re
import sys
from datetime import datetime

from movieRating.settings import LOG_PATH, FIELD_SEPARATOR


def log_debug(message: str) -> None:
    """Append timestamped message to the log file.

    A log file that cannot be written is reported on stderr; it never fails
    the caller.
    """
    ts = datetime.now().isoformat(timespec="seconds")
    try:
        LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
        with LOG_PATH.open("a", encoding="utf-8") as f:
            f.write(f"[{ts}] {message}\n")
    except OSError as exc:
        print(f"[{ts}] log write to {LOG_PATH} failed ({exc}): {message}", file=sys.stderr)


_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")

def parse_year(text: str | int) -> int:
    """
    Lenient year parser: leading integer of *text*, or 0 when there is none.

    "2010" -> 2010, " 1999abc" -> 1999, "abc" -> 0
    Digits too long to convert also give 0.
    """
    if isinstance(text, int):
        return text
    m = _LEADING_INT_RE.match(text or "")
    if not m:
        return 0
    try:
        return int(m.group(1))
    except ValueError:
        return 0


def current_year() -> int:
    return datetime.now().year


def has_line_break(text: str) -> bool:
    return "\n" in text or "\r" in text


def is_storable(text: str) -> bool:
    """True when *text* fits in one field of the catalog file."""
    return FIELD_SEPARATOR not in text and not has_line_break(text)
