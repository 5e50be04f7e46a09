"""
Record dataclasses produced by the article extractor.

All records are frozen: they are built once while scanning an article and
handed to the caller. ``to_dict`` produces the wire shape used by the
service, with Spanish field names and empty optional fields omitted.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class Definition:
    """One sense paragraph of an article."""

    category: str  # Grammatical label, e.g. "interjección" (may be empty)
    text: str  # Cleaned definition prose, never empty
    synonyms: Tuple[str, ...] = ()
    antonyms: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "tipo": self.category,
            "definicion": self.text,
        }
        if self.synonyms:
            result["sinonimos"] = list(self.synonyms)
        if self.antonyms:
            result["antonimos"] = list(self.antonyms)
        return result


@dataclass(frozen=True)
class ConjugationMode:
    """A conjugation mode with its tenses, in table order."""

    mode: str
    tenses: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "modo": self.mode,
            "tiempos": {tense: list(forms) for tense, forms in self.tenses.items()},
        }


@dataclass(frozen=True)
class WordRecord:
    """
    Structured form of one dictionary article.

    ``conjugations`` is None when conjugations were not requested, and an
    empty tuple when they were requested but the article has no table.
    """

    id: str
    headword: str
    etymology: str = ""
    definitions: Tuple[Definition, ...] = ()
    conjugations: Optional[Tuple[ConjugationMode, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "id": self.id,
            "encabezado": self.headword,
        }
        if self.etymology:
            result["etimologia"] = self.etymology
        result["definiciones"] = [d.to_dict() for d in self.definitions]
        if self.conjugations:
            result["conjugaciones"] = [c.to_dict() for c in self.conjugations]
        return result
