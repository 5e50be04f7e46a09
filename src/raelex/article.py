"""
Article record assembly.

Turns one dictionary article (the ``<article id="...">`` markup returned by
the service's fetch endpoint) into a WordRecord:

    article html -> id, headword, etymology      (inline patterns)
                 -> extract_definitions()        (always)
                 -> extract_conjugations()       (when requested)
                 -> WordRecord -> orjson bytes

Input without the article marker is not an article; it is handed back
unchanged so callers can pass already-clean text through.
"""

import logging
import re
from typing import Union

import orjson

from raelex.conjugations import extract_conjugations
from raelex.definitions import extract_definitions
from raelex.entities import clean_html_entities, strip_superscripts
from raelex.exceptions import SerializationError
from raelex.models import WordRecord

logger = logging.getLogger(__name__)


ARTICLE_MARKER = "<article id="

ID_PATTERN = re.compile(r'id="(\w+)"')
HEADER_PATTERN = re.compile(r"<header[^>]+>(.*?)(?:</i>)?</h")
ETYMOLOGY_PATTERN = re.compile(r'<p class="n2">(.*?)</p>', re.DOTALL)
TAG_PATTERN = re.compile(r"<[^>]+>")


def is_article(text: str) -> bool:
    return ARTICLE_MARKER in text


def extract_id(html: str) -> str:
    match = ID_PATTERN.search(html)
    return match.group(1) if match else ""


def extract_headword(html: str) -> str:
    match = HEADER_PATTERN.search(html)
    if not match:
        return ""
    return strip_superscripts(clean_html_entities(match.group(1)))


def extract_etymology(html: str) -> str:
    match = ETYMOLOGY_PATTERN.search(html)
    if not match:
        return ""
    return clean_html_entities(TAG_PATTERN.sub("", match.group(1))).strip()


def parse_article(document: str, include_conjugations: bool = False) -> Union[WordRecord, str]:
    """
    Extract a WordRecord from an article.

    Args:
        document: Raw markup (or any already-clean text)
        include_conjugations: Also rebuild the conjugation table

    Returns:
        The assembled WordRecord, or ``document`` itself when it does not
        contain an article.
    """
    if not is_article(document):
        return document

    record = WordRecord(
        id=extract_id(document),
        headword=extract_headword(document),
        etymology=extract_etymology(document),
        definitions=tuple(extract_definitions(document)),
        conjugations=tuple(extract_conjugations(document)) if include_conjugations else None,
    )
    logger.debug(
        f"Parsed article {record.id!r} ({record.headword}): "
        f"{len(record.definitions)} definitions"
    )
    return record


def serialize_record(record: WordRecord, pretty: bool = False) -> bytes:
    """Serialize a record to JSON bytes."""
    option = orjson.OPT_INDENT_2 if pretty else 0
    try:
        return orjson.dumps(record.to_dict(), option=option)
    except orjson.JSONEncodeError as e:
        raise SerializationError(f"Could not serialize article {record.id!r}: {e}") from e


def render_article(document: str, include_conjugations: bool = False, pretty: bool = False) -> bytes:
    """Parse an article and serialize it; non-article input passes through."""
    result = parse_article(document, include_conjugations)
    if isinstance(result, str):
        return result.encode("utf-8")
    return serialize_record(result, pretty=pretty)
