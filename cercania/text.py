"""Text normalization and Spanish collation helpers."""

import unicodedata
from typing import Iterator, Optional, Tuple

# ñ is its own letter in Spanish, sorted between n and o
_ENYE_WEIGHT = ord("n") + 0.5

# Primary groups: whitespace < punctuation < symbols < digits < letters
_SPACE, _PUNCTUATION, _SYMBOL, _DIGIT, _LETTER = range(5)

# Relative order of common punctuation and symbols in the root collation
_VARIABLE_ORDER = (
    "_-‐‑‒–—,;:!¡?¿.…·'‘’‚‹›\"“”„«»()[]{}§¶@*/\\&#%‰†‡•"
    "`´˜^¯¨°©®+±÷×<=>¬|¦~¤¢$£¥€"
)
_VARIABLE_WEIGHTS = {char: index for index, char in enumerate(_VARIABLE_ORDER)}

Element = Tuple[Optional[Tuple[int, float]], int, int]


def normalize(value: str) -> str:
    """Build a comparison key for a label.

    Decomposes the string, drops combining marks, trims and lowercases it.
    The result is only meant for joins, never for display.
    """
    decomposed = unicodedata.normalize("NFD", value)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.strip().lower()


def _primary_weight(char: str) -> Tuple[int, float]:
    category = unicodedata.category(char)
    if category[0] in ("Z", "C"):
        group = _SPACE
    elif category[0] == "P":
        group = _PUNCTUATION
    elif category[0] == "S":
        group = _SYMBOL
    elif category[0] == "N":
        return _DIGIT, ord(char)
    else:
        return _LETTER, ord(char)

    if char in _VARIABLE_WEIGHTS:
        return group, _VARIABLE_WEIGHTS[char]
    return group, len(_VARIABLE_ORDER) + ord(char)


def _collation_elements(value: str) -> Iterator[Element]:
    for char in unicodedata.normalize("NFC", value):
        folded = char.casefold()
        case_weight = 0 if char == folded else 1

        if folded == "ñ":
            yield (_LETTER, _ENYE_WEIGHT), 0, case_weight
            continue

        decomposed = unicodedata.normalize("NFD", folded)
        base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
        if not base:
            # A lone combining mark only carries accent information
            yield None, 1, case_weight
            continue

        accent_weight = 0 if base == decomposed else 1
        for ch in base:
            yield _primary_weight(ch), accent_weight, case_weight


def collation_key(value: str, strength: str = "tertiary") -> tuple:
    """Sort key approximating the Spanish ("es") collation.

    Whitespace sorts first, then punctuation, symbols, digits and letters,
    so "¿Aborto?" and "«Seguridad»" come before "Agua".

    Args:
        value: String to build the key for
        strength: "base" compares letters only, ignoring accents and case;
            "tertiary" breaks ties on accents first, then on case

    Returns:
        A tuple usable as ``key=`` for ``sorted``
    """
    elements = list(_collation_elements(value))
    primary = tuple(element[0] for element in elements if element[0] is not None)
    if strength == "base":
        return primary
    if strength != "tertiary":
        raise ValueError(f"Unsupported collation strength: {strength}")

    secondary = tuple(element[1] for element in elements)
    tertiary = tuple(element[2] for element in elements)
    return primary, secondary, tertiary
