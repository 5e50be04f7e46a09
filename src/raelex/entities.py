"""
Entity normalization for dictionary markup.

The dictionary service escapes a small, fixed set of accented characters as
hexadecimal character references and marks homographs with a superscript
index (``hola<sup>1</sup>``). Every text fragment that leaves the extractor
goes through ``normalize_text``.
"""

import re

# Escaped sequences known to appear in article bodies
ENTITY_MAP = {
    "&#xE1;": "á",
    "&#xE9;": "é",
    "&#xED;": "í",
    "&#xF3;": "ó",
    "&#xFA;": "ú",
    "&#xF1;": "ñ",
    "&#x2016;": "||",
}

# <sup>1</sup>, plus the escaped forms seen inside JSON string bodies
SUPERSCRIPT_PATTERN = re.compile(r"<sup>\d+(?:</|<\\/|\\/)sup>")


def clean_html_entities(text: str) -> str:
    """Replace the known character references with their characters."""
    for entity, char in ENTITY_MAP.items():
        text = text.replace(entity, char)
    return text


def strip_superscripts(text: str) -> str:
    """Remove homograph index markers."""
    # Removing one marker can expose another (<sup><sup>1</sup>2</sup>)
    while True:
        text, count = SUPERSCRIPT_PATTERN.subn("", text)
        if not count:
            return text


def normalize_text(text: str) -> str:
    """
    Strip superscript markers, then decode entities.

    Superscripts go first: decoding never produces ``<`` or ``&``, so the
    result is a fixed point and normalizing twice changes nothing.
    """
    return clean_html_entities(strip_superscripts(text))
