"""
Ontology Loading & Annotation Module

This module loads ontologies of phyloreferences and phylogenies into an
in-memory RDF store and reads annotations such as language-tagged labels.

Public Interface:
- OntologyStore: Loads an ontology and answers asserted-axiom queries
- select_labels, get_labels_in_english: Language-tagged label selection
- OntologyLoadError, InputNotFound, OntologyParseFailure: Loading errors
"""

from .labels import get_labels_in_english, select_labels
from .store import InputNotFound, OntologyLoadError, OntologyParseFailure, OntologyStore

__all__ = [
    "OntologyStore",
    "select_labels",
    "get_labels_in_english",
    "OntologyLoadError",
    "InputNotFound",
    "OntologyParseFailure",
]
