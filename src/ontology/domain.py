"""
Domain models for the ontology module.

These models are read-only views over an already loaded ontology graph.
"""

from dataclasses import dataclass
from typing import Optional
from rdflib import Literal


@dataclass(frozen=True)
class Label:
    """A human-readable label together with its language tag ("" when untagged)."""

    text: str
    language: str = ""

    @classmethod
    def from_literal(cls, literal: Literal) -> "Label":
        return cls(text=str(literal), language=literal.language or "")


@dataclass
class OntologyStats:
    """Basic counts about a loaded ontology, reported while loading."""

    total_triples: int
    total_classes: int
    total_individuals: int
    total_imports: int
    ontology_iri: Optional[str] = None
