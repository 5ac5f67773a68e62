"""
Told-axioms reasoner.

Answers instance and subclass queries from asserted rdf:type statements and
named rdfs:subClassOf / owl:equivalentClass chains only. It performs no
Description Logic inference, so phyloreferences defined by class expressions
match nothing unless their members are asserted; it needs no Java runtime.
"""

import logging
from typing import Set

from rdflib import URIRef

from ontology.store import OntologyStore
from ontology.vocabulary import OWL, RDF
from .base import Reasoner, ReasonerFactory

logger = logging.getLogger(__name__)


class StructuralReasoner(Reasoner):
    """Reasoner over the asserted class hierarchy of an OntologyStore."""

    name = "structural"

    def __init__(self, store: OntologyStore):
        super().__init__()
        self.store = store

    def _classes_below(self, class_iri: URIRef, direct: bool) -> Set[URIRef]:
        if direct:
            return self.store.direct_subclasses(class_iri)
        return self.store.subclass_closure(class_iri)

    def _instances_of(self, class_iri: URIRef, direct: bool) -> Set[URIRef]:
        classes = {class_iri}
        if not direct:
            classes |= self._classes_below(class_iri, direct=False)

        instances = set()
        for cls in classes:
            for individual in self.store.graph.subjects(RDF.type, cls):
                if isinstance(individual, URIRef):
                    instances.add(individual)
        return instances

    def _subclasses_of(self, class_iri: URIRef, direct: bool) -> Set[URIRef]:
        return self._classes_below(class_iri, direct) - {class_iri, OWL.Nothing}

    def _release(self) -> None:
        self.store = None


class StructuralReasonerFactory(ReasonerFactory):
    """Factory for StructuralReasoner."""

    name = "structural"

    def create_reasoner(self, store: OntologyStore) -> Reasoner:
        logger.info("Using told-axioms reasoner (no DL inference)")
        return StructuralReasoner(store)
