#!/usr/bin/env python3
"""
raelex: parse dictionary articles and query the dictionary service.

Usage:
    # Parse a saved article
    raelex parse article.html --conjugations --pretty

    # Parse a directory of saved articles into JSONL
    raelex batch data/articles/ data/words.jsonl --conjugations

    # Query the service
    raelex fetch KYtLWBc --conjugations
    raelex search hola
    raelex wotd
"""

import argparse
import logging
import sys
from pathlib import Path

import orjson

from raelex.article import is_article, parse_article, serialize_record
from raelex.batch import BatchStats, find_article_files, parse_files, write_jsonl
from raelex.client import DleClient
from raelex.config import load_settings
from raelex.exceptions import RaeLexError
from raelex.progress_display import ProgressDisplay

logger = logging.getLogger(__name__)


def write_output(body: bytes, pretty: bool = False) -> None:
    """Write a JSON body to stdout, re-indenting it when asked."""
    if pretty:
        try:
            body = orjson.dumps(orjson.loads(body), option=orjson.OPT_INDENT_2)
        except orjson.JSONDecodeError:
            logger.debug("Body is not JSON, printing as received")
    sys.stdout.buffer.write(body + b"\n")
    sys.stdout.flush()


def cmd_parse(args) -> int:
    if not args.input.exists():
        logger.error(f"Input file not found: {args.input}")
        return 1

    document = args.input.read_text(encoding="utf-8", errors="replace")
    if not is_article(document):
        logger.warning(f"{args.input} does not contain an article, printing as is")

    result = parse_article(document, args.conjugations)
    if isinstance(result, str):
        write_output(result.encode("utf-8"))
    else:
        write_output(serialize_record(result, pretty=args.pretty))
    return 0


def cmd_batch(args) -> int:
    if not args.input_dir.is_dir():
        logger.error(f"Input directory not found: {args.input_dir}")
        return 1

    paths = find_article_files(args.input_dir, args.pattern)
    logger.info(f"Found {len(paths):,} files matching {args.pattern} in {args.input_dir}")
    args.output.parent.mkdir(parents=True, exist_ok=True)

    stats = BatchStats()
    with ProgressDisplay("Parsing articles", update_interval=args.update_interval) as progress:
        def report(current: BatchStats) -> None:
            progress.update(Files=current.files, Parsed=current.parsed, Skipped=current.skipped)

        count = write_jsonl(
            args.output,
            parse_files(paths, args.conjugations, stats=stats, on_progress=report),
        )

    logger.info(f"Wrote {count:,} records to {args.output} ({stats.skipped:,} files skipped)")
    return 0


def cmd_remote(args) -> int:
    client = DleClient(args.settings)

    if args.command == "fetch":
        body = client.fetch_word(args.id, include_conjugations=args.conjugations)
    elif args.command == "search":
        body = client.search(args.word)
    elif args.command == "wotd":
        body = client.word_of_the_day()
    elif args.command == "random":
        body = client.random_word()
    elif args.command == "keys":
        body = client.key_query(args.query)
    elif args.command == "anagram":
        body = client.anagram(args.word)
    else:  # raw
        body = client.fetch_raw(args.endpoint)

    write_output(body, pretty=args.pretty)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Structured records from Spanish dictionary articles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", type=Path, default=None, help="YAML settings file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # parse command
    parse_parser = subparsers.add_parser("parse", help="Parse a saved article file")
    parse_parser.add_argument("input", type=Path, help="Article markup file")
    parse_parser.add_argument("--conjugations", action="store_true", help="Include conjugation tables")
    parse_parser.add_argument("--pretty", action="store_true", help="Indent the JSON output")

    # batch command
    batch_parser = subparsers.add_parser("batch", help="Parse a directory of articles into JSONL")
    batch_parser.add_argument("input_dir", type=Path, help="Directory of saved articles")
    batch_parser.add_argument("output", type=Path, help="Output JSONL file")
    batch_parser.add_argument("--conjugations", action="store_true", help="Include conjugation tables")
    batch_parser.add_argument(
        "--pattern", default="*.html",
        help="Glob pattern for article files (default: *.html)"
    )
    batch_parser.add_argument(
        "--update-interval", type=int, default=50,
        help="Refresh the progress panel every N files (default: 50)"
    )

    # service commands
    fetch_parser = subparsers.add_parser("fetch", help="Fetch and parse an article by id")
    fetch_parser.add_argument("id", help="Article id")
    fetch_parser.add_argument("--conjugations", action="store_true", help="Include conjugation tables")

    search_parser = subparsers.add_parser("search", help="Search for a word")
    search_parser.add_argument("word")

    subparsers.add_parser("wotd", help="Word of the day")
    subparsers.add_parser("random", help="Random word")

    keys_parser = subparsers.add_parser("keys", help="Autocomplete keys for a prefix")
    keys_parser.add_argument("query")

    anagram_parser = subparsers.add_parser("anagram", help="Anagrams of a word")
    anagram_parser.add_argument("word")

    raw_parser = subparsers.add_parser("raw", help="Print an endpoint's raw body")
    raw_parser.add_argument("endpoint", help="Endpoint path, e.g. 'fetch?id=KYtLWBc'")

    for sub in (fetch_parser, search_parser, keys_parser, anagram_parser, raw_parser):
        sub.add_argument("--pretty", action="store_true", help="Indent the JSON output")
    for name in ("wotd", "random"):
        subparsers.choices[name].add_argument("--pretty", action="store_true", help="Indent the JSON output")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "parse":
            return cmd_parse(args)
        if args.command == "batch":
            return cmd_batch(args)

        args.settings = load_settings(args.config)
        return cmd_remote(args)
    except RaeLexError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
