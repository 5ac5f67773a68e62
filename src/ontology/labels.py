"""
Selection of language-tagged labels on ontology entities.

Labels are rdfs:label annotation assertions whose values are literals.
A label is selected only when its language tag is exactly the requested
tag; an untagged label has the tag "" and is only returned when "" is
requested.
"""

from typing import Iterator, Set
from rdflib import Graph, Literal, URIRef
from rdflib.term import Node

from .domain import Label
from .vocabulary import LABEL


def iter_labels(entity: Node, ontology: Graph, label_property: URIRef = LABEL) -> Iterator[Label]:
    """Yield every literal label asserted on an entity."""
    for value in ontology.objects(entity, label_property):
        if isinstance(value, Literal):
            yield Label.from_literal(value)


def select_labels(entity: Node, ontology: Graph, language: str,
                  label_property: URIRef = LABEL) -> Set[str]:
    """Return the texts of all labels on the entity tagged with `language`.

    Args:
        entity: IRI (or blank node) of the entity
        ontology: Graph containing the annotation assertions
        language: Language tag to match exactly, e.g. "en"; "" for untagged labels
        label_property: Annotation property holding the labels

    Returns:
        Set of label texts, empty if no label matches
    """
    return {
        label.text
        for label in iter_labels(entity, ontology, label_property)
        if label.language == language
    }


def get_labels_in_english(entity: Node, ontology: Graph) -> Set[str]:
    """Return all labels on the entity tagged "en"."""
    return select_labels(entity, ontology, "en")
