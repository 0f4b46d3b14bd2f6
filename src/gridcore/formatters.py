"""Display formatters that turn a cell value into text."""
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Callable, Dict

logger = logging.getLogger(__name__)

Formatter = Callable[[Any], str]

DISPLAY_DATE = "%Y-%m-%d"
DISPLAY_DATETIME = "%Y-%m-%d %H:%M:%S"
_DATE_INPUTS = ("%Y-%m-%d", "%m/%d/%Y", "%Y-%m-%d %H:%M:%S")


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def default_formatter(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return f"{value:.2f}"
    if isinstance(value, (date, datetime)):
        return value.strftime(DISPLAY_DATE)
    return str(value)


def currency_formatter(value: Any) -> str:
    if isinstance(value, float):
        return f"${value:.2f}"
    if isinstance(value, int) and not isinstance(value, bool):
        return f"${value}.00"
    text = _text(value)
    if text:
        return "$" + text
    return "$0.00"


def percent_formatter(value: Any) -> str:
    if isinstance(value, float):
        return f"{value * 100:.1f}%"
    return f"{_text(value)}%"


def date_formatter(value: Any) -> str:
    if isinstance(value, (date, datetime)):
        return value.strftime(DISPLAY_DATE)
    if isinstance(value, str):
        for fmt in _DATE_INPUTS:
            try:
                return datetime.strptime(value, fmt).strftime(DISPLAY_DATE)
            except ValueError:
                continue
        return value
    return _text(value)


def time_formatter(value: Any) -> str:
    if isinstance(value, datetime):
        return value.strftime(DISPLAY_DATETIME)
    if isinstance(value, str):
        try:
            return datetime.strptime(value, DISPLAY_DATETIME).strftime(DISPLAY_DATETIME)
        except ValueError:
            return value
    return _text(value)


def boolean_formatter(true_text: str, false_text: str) -> Formatter:
    def _format(value: Any) -> str:
        if isinstance(value, bool):
            return true_text if value else false_text
        if isinstance(value, str) and value in ("true", "1", "yes"):
            return true_text
        return false_text

    return _format


def number_with_commas_formatter(value: Any) -> str:
    if isinstance(value, bool):
        return _text(value)
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        return f"{value:,.0f}"
    return _text(value)


def truncate_formatter(max_length: int) -> Formatter:
    def _format(value: Any) -> str:
        text = _text(value)
        if len(text) <= max_length:
            return text
        if max_length <= 3:
            return text[:max(0, max_length)]
        return text[: max_length - 3] + "..."

    return _format


def prefix_formatter(prefix: str) -> Formatter:
    return lambda value: prefix + _text(value)


def suffix_formatter(suffix: str) -> Formatter:
    return lambda value: _text(value) + suffix


_REGISTRY: Dict[str, Formatter] = {
    "default": default_formatter,
    "currency": currency_formatter,
    "percent": percent_formatter,
    "date": date_formatter,
    "time": time_formatter,
    "commas": number_with_commas_formatter,
}


def register_formatter(name: str, formatter: Formatter) -> None:
    _REGISTRY[name.strip().lower()] = formatter


def get_formatter(name: str) -> Formatter:
    formatter = _REGISTRY.get(name.strip().lower())
    if formatter is None:
        logger.warning("Unknown formatter %r; using default", name)
        return default_formatter
    return formatter
