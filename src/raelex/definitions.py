"""
Sense paragraph extraction.

Each ``<p class="j">`` block of an article is one sense. From it we pull the
grammatical category (the first ``<abbr title="...">``), inline synonyms and
antonyms, and the cleaned definition text.

The markup is matched with regular expressions rather than an HTML parser:
the service's inline synonym tables are routinely missing their ``</ul>``,
and the patterns below are written to tolerate that.
"""

import logging
import re
from typing import List

from raelex.entities import normalize_text
from raelex.models import Definition

logger = logging.getLogger(__name__)


# =============================================================================
# Patterns
# =============================================================================

PARAGRAPH_PATTERN = re.compile(r'<p class="j"[^>]*>(.*?)</p>', re.DOTALL)
CATEGORY_PATTERN = re.compile(r'<abbr[^>]*title="([^"]+)"[^>]*>')

# Synonym lists often lack </ul>, so match up to the enclosing cell instead
SYNONYM_BLOCK_PATTERN = re.compile(
    r"<table class='sinonimos'>.*?<ul[^>]*>(.*?)</td>", re.DOTALL
)
ANTONYM_BLOCK_PATTERN = re.compile(
    r'<div class="ant-header ant-inline">.*?<ul[^>]*>(.*?)</ul>.*?</div>', re.DOTALL
)
MARK_PATTERN = re.compile(r"<mark[^>]*>([^<]+)</mark>")

# Removed from the paragraph body, in this order
STRIP_PATTERNS = (
    re.compile(r"<abbr[^>]+>.*?</abbr>"),
    re.compile(r'<span class="h">.*?</span>'),
    re.compile(r'<span class="n_acep">\S+ </span>'),
    re.compile(r'<div class="[^"]*-header[^"]*-inline">.*?</div>', re.DOTALL),
)
TAG_PATTERN = re.compile(r"<[^>]+>")

# Literal substring replacements, applied in order with no word boundaries
ABBREVIATIONS = (
    ("sing.", "singular"),
    ("pl.", "plural"),
    ("t.", "también"),
    ("p.", "poco"),
)


# =============================================================================
# Helpers
# =============================================================================


def extract_terms(block: str) -> List[str]:
    """Collect highlighted terms from a list block, deduplicated in order."""
    terms: List[str] = []
    for match in MARK_PATTERN.finditer(block):
        term = match.group(1).strip()
        if term and term not in terms:
            terms.append(term)
    return terms


def extract_synonyms(paragraph: str) -> List[str]:
    match = SYNONYM_BLOCK_PATTERN.search(paragraph)
    return extract_terms(match.group(1)) if match else []


def extract_antonyms(paragraph: str) -> List[str]:
    match = ANTONYM_BLOCK_PATTERN.search(paragraph)
    return extract_terms(match.group(1)) if match else []


def expand_abbreviations(text: str) -> str:
    for abbreviation, expansion in ABBREVIATIONS:
        text = text.replace(abbreviation, expansion)
    return text


def clean_definition_text(paragraph: str) -> str:
    """Reduce a sense paragraph to its plain definition text."""
    text = paragraph
    for pattern in STRIP_PATTERNS:
        text = pattern.sub("", text)
    text = TAG_PATTERN.sub("", text)
    text = normalize_text(text).strip()
    return expand_abbreviations(text)


# =============================================================================
# Extraction
# =============================================================================


def parse_paragraph(paragraph: str) -> Definition:
    """Build a Definition from the inner markup of one sense paragraph."""
    match = CATEGORY_PATTERN.search(paragraph)
    category = normalize_text(match.group(1)) if match else ""

    return Definition(
        category=category,
        text=clean_definition_text(paragraph),
        synonyms=tuple(extract_synonyms(paragraph)),
        antonyms=tuple(extract_antonyms(paragraph)),
    )


def extract_definitions(html: str) -> List[Definition]:
    """
    Extract every sense paragraph of an article, in document order.

    Paragraphs whose cleaned text is empty are dropped. Missing categories,
    synonyms or antonyms yield empty fields.
    """
    definitions: List[Definition] = []
    paragraphs = PARAGRAPH_PATTERN.findall(html)

    for paragraph in paragraphs:
        definition = parse_paragraph(paragraph)
        if not definition.text:
            logger.debug("Dropping sense paragraph with empty text")
            continue
        definitions.append(definition)

    logger.debug(f"Extracted {len(definitions)} of {len(paragraphs)} sense paragraphs")
    return definitions
