"""Utility helpers for normalization and parsing."""
from __future__ import annotations

import math
import re
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Iterable, Optional, Union
from dateutil import parser as date_parser


CURRENCY_SYMBOLS_RE = re.compile(r"[\$€£¥]|AED|USD|EUR|GBP|JPY", re.IGNORECASE)
TRUE_WORDS = frozenset({"true", "1", "yes"})
FALSE_WORDS = frozenset({"false", "0", "no"})

Number = Union[int, float]


def stringify(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def parse_number(value: Any) -> Optional[Number]:
    """Return ``value`` as an int or float, or ``None`` when it is not numeric.

    Strings may carry thousands separators, currency symbols, or accounting
    parentheses for negatives. NaN never parses.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal) and value.is_nan():
        return None
    if isinstance(value, (float, Decimal)):
        number = float(value)
        return None if math.isnan(number) else number
    if not isinstance(value, str) or not value:
        return None
    cleaned = value.strip()
    negative = cleaned.startswith("(") and cleaned.endswith(")")
    if negative:
        cleaned = cleaned[1:-1]
    cleaned = CURRENCY_SYMBOLS_RE.sub("", cleaned)
    cleaned = cleaned.replace(",", "").strip()
    if negative and cleaned and not cleaned.startswith("-"):
        cleaned = f"-{cleaned}"
    if not cleaned:
        return None
    try:
        return int(cleaned)
    except ValueError:
        pass
    try:
        number = float(cleaned)
    except ValueError:
        return None
    return None if math.isnan(number) else number


def parse_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_WORDS:
            return True
        if lowered in FALSE_WORDS:
            return False
    return None


def _naive(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(timezone.utc).replace(tzinfo=None)


def parse_date(value: Any, formats: Iterable[str], lenient: bool = False) -> Optional[datetime]:
    """Parse ``value`` against ``formats`` in order; first match wins.

    Aware datetimes are normalised to naive UTC so any two results compare.
    With ``lenient`` set, strings matching none of the formats get one more
    attempt through dateutil.
    """
    if isinstance(value, datetime):
        return _naive(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    if not lenient:
        return None
    try:
        return _naive(date_parser.parse(text, fuzzy=False))
    except (ValueError, OverflowError):
        return None


def is_date(value: str) -> bool:
    if not value:
        return False
    text = value.strip()
    if not text:
        return False
    has_alpha = any(ch.isalpha() for ch in text)
    has_sep = any(sep in text for sep in ("/", "-", "."))
    if not has_alpha and not has_sep:
        return False
    try:
        date_parser.parse(text, fuzzy=False)
        return True
    except (ValueError, OverflowError):
        return False
