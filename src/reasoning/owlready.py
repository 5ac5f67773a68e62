"""
Description Logic reasoners provided by owlready2.

owlready2 runs HermiT or Pellet in a Java subprocess and writes the inferred
class memberships and subclass axioms back into its quadstore. Each reasoner
gets its own private World, loaded with the triples of the OntologyStore, so
disposing a reasoner is closing its World.
"""

import io
import logging
import subprocess
from typing import Optional, Set

import owlready2
from owlready2 import OwlReadyError
from rdflib import URIRef

from ontology.store import OntologyStore
from .base import Reasoner, ReasonerFactory, ReasonerFailure

logger = logging.getLogger(__name__)

# IRI of the scratch ontology the store's triples are loaded into
INFERRED_ONTOLOGY_IRI = "http://example.org/jphyloref/inferred.owl"

SUPPORTED_REASONERS = ("hermit", "pellet")


class OwlreadyReasoner(Reasoner):
    """Reasoner answering queries from a classified owlready2 World."""

    def __init__(self, world: owlready2.World, name: str):
        super().__init__()
        self.world = world
        self.name = name

    def _class(self, class_iri: URIRef) -> Optional[owlready2.ThingClass]:
        entity = self.world[str(class_iri)]
        return entity if isinstance(entity, owlready2.ThingClass) else None

    def _instances_of(self, class_iri: URIRef, direct: bool) -> Set[URIRef]:
        cls = self._class(class_iri)
        if cls is None:
            return set()
        if direct:
            individuals = cls.direct_instances(world=self.world)
        else:
            individuals = cls.instances(world=self.world)
        return {URIRef(ind.iri) for ind in individuals if not ind.iri.startswith("_:")}

    def _subclasses_of(self, class_iri: URIRef, direct: bool) -> Set[URIRef]:
        cls = self._class(class_iri)
        if cls is None:
            return set()
        if direct:
            subclasses = cls.subclasses(world=self.world)
        else:
            subclasses = cls.descendants(include_self=False, world=self.world)
        return {
            URIRef(sub.iri) for sub in subclasses
            if isinstance(sub, owlready2.ThingClass) and sub is not owlready2.Nothing
            and sub is not cls
        }

    def _release(self) -> None:
        self.world.close()
        self.world = None


class OwlreadyReasonerFactory(ReasonerFactory):
    """Factory running HermiT or Pellet through owlready2."""

    def __init__(self, reasoner: str = "hermit", java_exe: Optional[str] = None):
        """
        Args:
            reasoner: "hermit" or "pellet"
            java_exe: Path to the Java executable; owlready2's default if None
        """
        if reasoner not in SUPPORTED_REASONERS:
            raise ValueError(f"Unsupported owlready2 reasoner: {reasoner}")
        self.name = reasoner
        self.java_exe = java_exe

    def _classify(self, world: owlready2.World) -> None:
        if self.name == "pellet":
            owlready2.sync_reasoner_pellet(world, infer_property_values=False,
                                           infer_data_property_values=False, debug=0)
        else:
            owlready2.sync_reasoner_hermit(world, infer_property_values=False, debug=0)

    def create_reasoner(self, store: OntologyStore) -> Reasoner:
        if self.java_exe:
            owlready2.JAVA_EXE = self.java_exe

        world = owlready2.World()
        try:
            ontology = world.get_ontology(INFERRED_ONTOLOGY_IRI)
            ontology.load(fileobj=io.BytesIO(store.to_ntriples()), format="ntriples")
            logger.info("Classifying ontology with %s", self.name)
            self._classify(world)
        except (OwlReadyError, subprocess.CalledProcessError, OSError) as exc:
            world.close()
            raise ReasonerFailure(f"Reasoner '{self.name}' failed: {exc}") from exc

        return OwlreadyReasoner(world, self.name)
