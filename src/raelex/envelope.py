"""
Response body cleanup for the dictionary service.

Most endpoints answer with JSON wrapped in a callback (``json({...})`` or
``jsonp123([...])``) and sprinkled with escaped accents; the fetch endpoint
answers with article markup. ``clean_response`` turns either into a plain
JSON body.
"""

import logging

from raelex.article import is_article, render_article
from raelex.entities import normalize_text

logger = logging.getLogger(__name__)

# Callback names used by the service, e.g. json(...) and jsonp123(...)
CALLBACK_PREFIXES = ("json(", "jsonp123(")


def strip_callback(body: str) -> str:
    """Remove a known callback wrapper, if present."""
    body = body.strip()
    for prefix in CALLBACK_PREFIXES:
        if body.startswith(prefix) and body.endswith(")"):
            body = body[len(prefix):-1]
    return body


def clean_response(body: str, include_conjugations: bool = False) -> bytes:
    """Produce the cleaned JSON body for a raw service response."""
    body = body.strip()

    if is_article(body):
        logger.debug("Response is an article, parsing")
        return render_article(body, include_conjugations)

    return normalize_text(strip_callback(body)).encode("utf-8")
