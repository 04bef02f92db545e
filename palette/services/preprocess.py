"""Persian/Arabic text normalization for every search surface."""
from __future__ import annotations

import re
import unicodedata

PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
ARABIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"
ASCII_DIGITS = "0123456789"

DIGIT_TRANSLATION = str.maketrans({
    **{ord(p): ASCII_DIGITS[i] for i, p in enumerate(PERSIAN_DIGITS)},
    **{ord(a): ASCII_DIGITS[i] for i, a in enumerate(ARABIC_DIGITS)},
})

LETTER_TRANSLATION = str.maketrans({
    ord("ي"): "ی",
    ord("ى"): "ی",
    ord("ك"): "ک",
    ord("ۀ"): "ه",
    ord("ة"): "ه",
    ord("ؤ"): "و",
    ord("أ"): "ا",
    ord("إ"): "ا",
})

# Tanvin, short vowels, shadda, sukun, hamza marks and tatweel.
DIACRITICS_RE = re.compile("[\u064b-\u0652\u0654\u0655\u0640]")
JOINERS_RE = re.compile("[\u200c\u200d]")
WHITESPACE_RE = re.compile(r"\s+")
PUNCTUATION_RE = re.compile(r"""[`~^'"،٬؛؟?.…,/\\\-+=(){}\[\]|:!@#$%&*<>٫_;]""")


def normalize(text: str | None) -> str:
    """Canonicalize digits, letter variants and spacing of a search string.

    The function is total and idempotent: ``normalize(normalize(x))`` always
    equals ``normalize(x)``. Zero-width joiners become spaces so compound
    Persian words split into tokens the same way regardless of how they were
    typed.
    """

    if not text:
        return ""

    # Marks go before NFKC so a tatweel never separates a letter from a mark
    # that a later pass would compose, and again after it for compatibility
    # forms that expand to marks.
    normalized = DIACRITICS_RE.sub("", text)
    normalized = unicodedata.normalize("NFKC", normalized)
    normalized = DIACRITICS_RE.sub("", normalized)
    normalized = normalized.translate(LETTER_TRANSLATION)
    # Recompose pairs the letter map exposed, such as alef followed by madda.
    normalized = unicodedata.normalize("NFC", normalized)
    normalized = normalized.translate(DIGIT_TRANSLATION)
    normalized = JOINERS_RE.sub(" ", normalized)
    normalized = WHITESPACE_RE.sub(" ", normalized)
    normalized = normalized.strip()
    normalized = normalized.lower()
    return normalized


def normalize_index_text(text: str | None) -> str:
    """Normalize text for row indexes, turning punctuation into word breaks."""

    normalized = PUNCTUATION_RE.sub(" ", normalize(text))
    return WHITESPACE_RE.sub(" ", normalized).strip()


def tokenize(normalized: str) -> list[str]:
    """Split an already normalized string into non-empty tokens."""

    return [token for token in normalized.split(" ") if token]


__all__ = ["normalize", "normalize_index_text", "tokenize"]
