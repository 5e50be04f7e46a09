"""
rae-lexicon: structured records from Spanish dictionary articles.

The extraction engine turns one article of markup into a WordRecord
(headword, etymology, definitions and, on request, conjugation tables).
"""

from raelex.article import parse_article, render_article, serialize_record
from raelex.exceptions import RaeLexError, SerializationError
from raelex.models import ConjugationMode, Definition, WordRecord

__version__ = "0.1.0"

__all__ = [
    "ConjugationMode",
    "Definition",
    "RaeLexError",
    "SerializationError",
    "WordRecord",
    "parse_article",
    "render_article",
    "serialize_record",
]
