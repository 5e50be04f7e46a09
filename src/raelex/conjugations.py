"""
Conjugation table reconstruction.

Verb articles carry a ``<table class="cnj">`` whose rows are not tagged with
their meaning. A row's role has to be inferred from its shape:

    MODE_HEADER     one wide <th> naming a mode ("Indicativo", ...)
    TENSE_HEADER    one wide <th> naming anything else (a single tense)
    COLUMN_HEADER   narrow <th> cells, one tense name per column
    DATA            any row with <td> cells

Architecture:
    table html -> split_rows() -> classify_row() -> TableRow
                                                      |
                                                      v
                                     ConjugationTableParser.feed()
                                                      |
                                                      v
                                          list[ConjugationMode]

Alignment between header names, person labels and verb forms is purely
positional, counted from the end of the cell list. Tables with decorative
extra columns will misalign; that matches the output of the existing
service and is kept as is.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Optional

from raelex.entities import normalize_text
from raelex.models import ConjugationMode

logger = logging.getLogger(__name__)


# =============================================================================
# Vocabulary
# =============================================================================

NON_PERSONAL_MODE = "Formas no personales"
IMPERATIVE_MODE = "Imperativo"
PARTICIPLE_PREFIX = "Participio"

MODE_NAMES = frozenset({
    NON_PERSONAL_MODE,
    "Indicativo",
    "Subjuntivo",
    IMPERATIVE_MODE,
})

# Column labels describing the person columns rather than a tense
METADATA_LABELS = frozenset({
    "Número",
    "Personas del discurso",
    "Pronombres personales",
})


def is_participle_mode(name: str) -> bool:
    return name.startswith(PARTICIPLE_PREFIX)


def is_mode_name(name: str) -> bool:
    return name in MODE_NAMES or is_participle_mode(name)


def is_non_personal_mode(name: str) -> bool:
    return name == NON_PERSONAL_MODE or is_participle_mode(name)


# =============================================================================
# Row segmentation
# =============================================================================

TABLE_PATTERN = re.compile(r'<table class="cnj"[^>]*>(.*?)</table>', re.DOTALL)
ROW_PATTERN = re.compile(r"<tr[^>]*>(.*?)</tr>", re.DOTALL)
CELL_PATTERN = re.compile(r"<(th|td)(\s[^>]*)?>(.*?)</\1>", re.DOTALL)
COLSPAN_PATTERN = re.compile(r'colspan=["\']?(\d+)')
TAG_PATTERN = re.compile(r"<[^>]+>")


class RowKind(Enum):
    MODE_HEADER = "mode_header"
    TENSE_HEADER = "tense_header"
    COLUMN_HEADER = "column_header"
    DATA = "data"
    OTHER = "other"


@dataclass
class TableCell:
    text: str
    is_header: bool
    colspan: int = 1

    @property
    def is_wide(self) -> bool:
        return self.colspan > 1


@dataclass
class TableRow:
    kind: RowKind
    cells: List[TableCell] = field(default_factory=list)

    @property
    def texts(self) -> List[str]:
        return [cell.text for cell in self.cells]


def parse_cells(row_html: str) -> List[TableCell]:
    cells = []
    for tag, attrs, content in CELL_PATTERN.findall(row_html):
        span = COLSPAN_PATTERN.search(attrs)
        cells.append(TableCell(
            text=normalize_text(TAG_PATTERN.sub("", content)).strip(),
            is_header=(tag == "th"),
            colspan=int(span.group(1)) if span else 1,
        ))
    return cells


def classify_row(row_html: str) -> TableRow:
    """Segment one <tr> into cells and decide its role from its shape."""
    cells = parse_cells(row_html)

    if not cells:
        kind = RowKind.OTHER
    elif any(not cell.is_header for cell in cells):
        kind = RowKind.DATA
    elif len(cells) == 1 and cells[0].is_wide:
        kind = RowKind.MODE_HEADER if is_mode_name(cells[0].text) else RowKind.TENSE_HEADER
    else:
        kind = RowKind.COLUMN_HEADER

    return TableRow(kind=kind, cells=cells)


def split_rows(table_html: str) -> List[TableRow]:
    return [classify_row(row) for row in ROW_PATTERN.findall(table_html)]


# =============================================================================
# State machine
# =============================================================================


class ParserState(Enum):
    NO_MODE = "no_mode"
    MODE_OPEN = "mode_open"


class ConjugationTableParser:
    """
    Rebuild conjugation modes from a flat sequence of classified rows.

    Usage:
        parser = ConjugationTableParser()
        for row in split_rows(table_html):
            parser.feed(row)
        modes = parser.finish()

    A mode is emitted only once it holds at least one tense entry; a mode
    header followed directly by another mode header leaves nothing behind.
    """

    def __init__(self):
        self.state = ParserState.NO_MODE
        self.mode = ""
        self.tenses: Dict[str, List[str]] = {}
        self.headers: List[str] = []
        self.modes: List[ConjugationMode] = []

    def feed(self, row: TableRow) -> None:
        if row.kind is RowKind.MODE_HEADER:
            self._open_mode(row.cells[0].text)
        elif row.kind is RowKind.TENSE_HEADER:
            self.headers = [row.cells[0].text]
        elif row.kind is RowKind.COLUMN_HEADER:
            self.headers = self._column_headers(row.texts)
        elif row.kind is RowKind.DATA:
            self._add_data(row.texts)

    def finish(self) -> List[ConjugationMode]:
        self._emit()
        self.state = ParserState.NO_MODE
        self.tenses = {}
        return self.modes

    # -------------------------------------------------------------------------

    def _open_mode(self, name: str) -> None:
        self._emit()
        self.state = ParserState.MODE_OPEN
        self.mode = name
        self.tenses = {}
        self.headers = []

    def _emit(self) -> None:
        if self.state is ParserState.MODE_OPEN and self.tenses:
            self.modes.append(ConjugationMode(
                mode=self.mode,
                tenses=MappingProxyType(
                    {tense: tuple(forms) for tense, forms in self.tenses.items()}
                ),
            ))
            logger.debug(f"Emitted mode {self.mode!r} with {len(self.tenses)} tenses")
        elif self.state is ParserState.MODE_OPEN:
            logger.debug(f"Dropping empty mode {self.mode!r}")

    def _column_headers(self, labels: List[str]) -> List[str]:
        headers = []
        for label in labels:
            if label in METADATA_LABELS:
                continue
            # The imperative header row is blank above its only tense column
            if not label and self.mode == IMPERATIVE_MODE:
                label = IMPERATIVE_MODE
            headers.append(label)
        return headers

    def _append(self, tense: str, form: str) -> None:
        self.tenses.setdefault(tense, []).append(form)

    def _add_data(self, cells: List[str]) -> None:
        if self.state is ParserState.NO_MODE:
            self.state = ParserState.MODE_OPEN
            self.mode = NON_PERSONAL_MODE

        if is_non_personal_mode(self.mode):
            self._add_non_personal(cells)
        else:
            self._add_personal(cells)

    def _add_non_personal(self, cells: List[str]) -> None:
        if not self.headers:
            if is_participle_mode(self.mode) and cells[-1]:
                self._append(PARTICIPLE_PREFIX, cells[-1])
            return

        for header, text in zip(self.headers, cells):
            if text:
                self._append(header, text)

    def _add_personal(self, cells: List[str]) -> None:
        count = len(self.headers)
        if not count:
            return

        person: Optional[str] = None
        if len(cells) > count:
            person = cells[-count - 1]
            cells = cells[-count:]

        for header, text in zip(self.headers, cells):
            if not text:
                continue
            if person:
                text = f"{person} {text}"
            self._append(header, text)


def extract_conjugations(html: str) -> List[ConjugationMode]:
    """
    Extract the conjugation modes of an article.

    Returns an empty list when the article has no conjugation table.
    """
    match = TABLE_PATTERN.search(html)
    if not match:
        logger.debug("No conjugation table found")
        return []

    parser = ConjugationTableParser()
    for row in split_rows(match.group(1)):
        parser.feed(row)
    return parser.finish()
