"""
Batch parsing of saved articles into JSONL.

Reads every matching file under a directory, parses the ones that contain
an article, and writes one serialized WordRecord per line.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional

import orjson

from raelex.article import parse_article
from raelex.exceptions import SerializationError
from raelex.models import WordRecord

logger = logging.getLogger(__name__)


@dataclass
class BatchStats:
    files: int = 0
    parsed: int = 0
    skipped: int = 0


def find_article_files(input_dir: Path, pattern: str = "*.html") -> List[Path]:
    """List matching files under input_dir, sorted for stable output."""
    return sorted(p for p in input_dir.rglob(pattern) if p.is_file())


def write_jsonl(path: Path, records: Iterable[WordRecord]) -> int:
    """Write records to a JSONL file, return count."""
    count = 0
    with open(path, "wb") as f:
        for record in records:
            try:
                f.write(orjson.dumps(record.to_dict()))
            except orjson.JSONEncodeError as e:
                raise SerializationError(f"Could not serialize article {record.id!r}: {e}") from e
            f.write(b"\n")
            count += 1
    return count


def parse_files(
    paths: Iterable[Path],
    include_conjugations: bool = False,
    stats: Optional[BatchStats] = None,
    on_progress: Optional[Callable[[BatchStats], None]] = None,
) -> Iterator[WordRecord]:
    """
    Parse article files, yielding a record for each one.

    Files that do not contain an article are skipped and counted.
    """
    stats = stats if stats is not None else BatchStats()

    for path in paths:
        stats.files += 1
        document = path.read_text(encoding="utf-8", errors="replace")
        result = parse_article(document, include_conjugations)

        if isinstance(result, WordRecord):
            stats.parsed += 1
            yield result
        else:
            logger.debug(f"Skipping {path}: not an article")
            stats.skipped += 1

        if on_progress:
            on_progress(stats)
