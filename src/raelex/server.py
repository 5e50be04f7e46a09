"""
HTTP front end exposing the dictionary endpoints as plain JSON.

Usage:
    raelex-server [--config PATH]

Routes mirror the upstream service: /wotd, /random, /search?w=,
/fetch?id=[&conjugaciones=true], /keys?q=, /anagram?w=.
"""

import argparse
import logging
from pathlib import Path
from typing import Callable, Optional

from flask import Flask, Response, request

from raelex.client import DleClient
from raelex.config import load_settings
from raelex.exceptions import RaeLexError

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


def _respond(call: Callable[[], bytes]) -> Response:
    try:
        body = call()
    except RaeLexError as e:
        logger.error(f"{request.path}: {e}")
        return Response(str(e), status=500, mimetype="text/plain")
    return Response(body, status=200, content_type=JSON_CONTENT_TYPE)


def _missing(name: str) -> Response:
    return Response(f"Falta el parámetro '{name}'", status=400, mimetype="text/plain")


def _flag(name: str) -> bool:
    return request.args.get(name, "") == "true"


def create_app(client: Optional[DleClient] = None) -> Flask:
    """Build the Flask app around a client (a default one if not given)."""
    app = Flask(__name__)
    client = client or DleClient()

    @app.route("/wotd")
    def wotd():
        return _respond(client.word_of_the_day)

    @app.route("/random")
    def random():
        return _respond(client.random_word)

    @app.route("/search")
    def search():
        query = request.args.get("w", "")
        if not query:
            return _missing("w")
        return _respond(lambda: client.search(query))

    @app.route("/fetch")
    def fetch():
        word_id = request.args.get("id", "")
        if not word_id:
            return _missing("id")
        with_conjugations = _flag("conjugaciones") or _flag("conjugations")
        return _respond(lambda: client.fetch_word(word_id, with_conjugations))

    @app.route("/keys")
    def keys():
        query = request.args.get("q", "")
        if not query:
            return _missing("q")
        return _respond(lambda: client.key_query(query))

    @app.route("/anagram")
    def anagram():
        word = request.args.get("w", "")
        if not word:
            return _missing("w")
        return _respond(lambda: client.anagram(word))

    return app


def main() -> int:
    parser = argparse.ArgumentParser(description="Serve dictionary lookups as JSON")
    parser.add_argument("--config", type=Path, default=None, help="YAML settings file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    try:
        settings = load_settings(args.config)
    except RaeLexError as e:
        logger.error(str(e))
        return 1

    app = create_app(DleClient(settings))
    logger.info(f"Servidor iniciando en puerto {settings.port}...")
    app.run(host=settings.host, port=settings.port)
    return 0


if __name__ == "__main__":
    exit(main())
