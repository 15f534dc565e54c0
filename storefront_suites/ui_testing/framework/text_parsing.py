"""
Tolerant extraction of typed values from rendered storefront text.

Prices keep only digits and the decimal point ("$360", "360 USD", "*360*"
all read as 360.0). Order details take the first run of digits after a
labelled prefix ("Id: 12345", "Amount: 1460 USD").

A mismatch returns a sentinel (0.0, "" or 0) and logs a warning so the
caller can record a soft assertion failure. Pass ``strict=True`` to get
ParseExtractionMismatch raised instead.
"""

from __future__ import annotations

import re
from typing import Optional

from loguru import logger

from .errors import ParseExtractionMismatch


PRICE_SENTINEL = 0.0
ORDER_ID_SENTINEL = ""
AMOUNT_SENTINEL = 0

_NON_PRICE_CHARS = re.compile(r"[^0-9.]")
_ORDER_ID = re.compile(r"Id:\s*(\d+)")
_ORDER_AMOUNT = re.compile(r"Amount:\s*(\d+)")


def _mismatch(text: Optional[str], pattern: str, strict: bool, sentinel):
    error = ParseExtractionMismatch(text or "", pattern)
    if strict:
        raise error
    logger.warning(f"{error}; using sentinel {sentinel!r}")
    return sentinel


def parse_price(text: Optional[str], strict: bool = False) -> float:
    """Parse a currency string into a float price."""
    digits = _NON_PRICE_CHARS.sub("", text or "")
    try:
        return float(digits)
    except ValueError:
        return _mismatch(text, "a numeric price", strict, PRICE_SENTINEL)


def parse_order_id(text: Optional[str], strict: bool = False) -> str:
    """Extract the order id digits following "Id:"."""
    match = _ORDER_ID.search(text or "")
    if match is None:
        return _mismatch(text, "'Id: <digits>'", strict, ORDER_ID_SENTINEL)
    return match.group(1)


def parse_order_amount(text: Optional[str], strict: bool = False) -> int:
    """Extract the integer amount following "Amount:"."""
    match = _ORDER_AMOUNT.search(text or "")
    if match is None:
        return _mismatch(text, "'Amount: <digits>'", strict, AMOUNT_SENTINEL)
    return int(match.group(1))


__all__ = [
    "PRICE_SENTINEL",
    "ORDER_ID_SENTINEL",
    "AMOUNT_SENTINEL",
    "parse_price",
    "parse_order_id",
    "parse_order_amount",
]
