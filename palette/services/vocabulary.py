"""Static store vocabulary used by spelling correction and synonym expansion."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

DOMAIN_DICTIONARY: tuple[str, ...] = (
    "شارژر",
    "گوشی",
    "موبایل",
    "هندزفری",
    "ایرفون",
    "هدفون",
    "lcd",
    "ال سی دی",
    "کاور",
    "قاب",
    "باتری",
    "کابل",
    "سامسونگ",
    "شیائومی",
    "آیفون",
    "iphone",
    "a52",
    "a52s",
)

SYNONYMS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "گوشی": ("موبایل", "iphone"),
        "موبایل": ("گوشی", "iphone"),
        "هندزفری": ("ایرفون",),
        "ال سی دی": ("lcd", "نمایشگر"),
        "شارژر": ("آداپتور", "adapter"),
    }
)


__all__ = ["DOMAIN_DICTIONARY", "SYNONYMS"]
