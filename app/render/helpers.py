from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, Iterable, Optional
from zoneinfo import ZoneInfo

from markupsafe import Markup, escape

from app.core.config import settings

# Genitive month names, as used in "19 октября 2026 г."
RU_MONTHS = [
    "января", "февраля", "марта", "апреля", "мая", "июня",
    "июля", "августа", "сентября", "октября", "ноября", "декабря",
]

INVALID_DATE = "Invalid date"

def _to_date(value: Any, tz: ZoneInfo) -> Optional[date]:
    if isinstance(value, datetime):
        return value.astimezone(tz).date() if value.tzinfo else value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        # epoch milliseconds
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc).astimezone(tz).date()
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return _to_date(datetime.fromisoformat(text), tz)
        except ValueError:
            return None
    return None

def custom_date(value: Any, tz_name: Optional[str] = None) -> str:
    """
    Format a date in Russian long form: '19 октября 2026 г.'
    Accepts ISO strings, date/datetime objects or epoch milliseconds.
    """
    if value is None or value == "":
        return ""
    tz = ZoneInfo(tz_name or settings.DISPLAY_TIMEZONE)
    d = _to_date(value, tz)
    if d is None:
        return INVALID_DATE
    return f"{d.day} {RU_MONTHS[d.month - 1]} {d.year} г."

def bold_phrase(phrase: Any, words: Optional[Iterable[str]] = None) -> Markup:
    """Wrap greeting keywords in <b>; everything else is escaped."""
    if phrase is None:
        return Markup("")
    keywords = set(settings.BOLD_WORDS if words is None else words)
    parts = []
    for word in str(phrase).split(" "):
        if word in keywords:
            parts.append(Markup("<b>%s</b>") % word)
        else:
            parts.append(escape(word))
    return Markup(" ").join(parts)

def build_helpers(
    tz_name: Optional[str] = None,
    bold_words: Optional[Iterable[str]] = None,
) -> Dict[str, Callable[..., Any]]:
    """Helper table handed to a single render call."""
    words = list(settings.BOLD_WORDS if bold_words is None else bold_words)
    return {
        "custom_date": lambda value: custom_date(value, tz_name),
        "bold_phrase": lambda phrase: bold_phrase(phrase, words),
    }
