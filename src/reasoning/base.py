"""
Reasoner interface consumed by the resolution pipeline.

A reasoner is created over an OntologyStore by a ReasonerFactory, which both
constructs and classifies it. Reasoners hold external resources (a Java
process's results, an owlready2 World, ...) and must be disposed exactly
once; querying a disposed reasoner is a programming error.
"""

from abc import ABC, abstractmethod
from typing import Set

from rdflib import URIRef

from ontology.store import OntologyStore


class ReasonerFailure(RuntimeError):
    """The reasoner could not be constructed or classification failed."""


class CallerContractViolation(RuntimeError):
    """A reasoner was used outside its contract, e.g. queried after disposal."""


class Reasoner(ABC):
    """Abstract base class for classified reasoners."""

    name = "abstract"

    def __init__(self):
        self._disposed = False

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def _check_active(self):
        if self._disposed:
            raise CallerContractViolation(f"Reasoner '{self.name}' has already been disposed")

    def instances_of(self, class_iri: URIRef, direct: bool = False) -> Set[URIRef]:
        """
        Get the named individuals inferred to be instances of a class.

        Args:
            class_iri: IRI of the class
            direct: If False, instances of subclasses are included

        Returns:
            Set of individual IRIs, flattened into one set
        """
        self._check_active()
        return self._instances_of(class_iri, direct)

    def subclasses_of(self, class_iri: URIRef, direct: bool = False) -> Set[URIRef]:
        """
        Get the named classes inferred to be subclasses of a class.

        Args:
            class_iri: IRI of the class
            direct: If False, indirect subclasses are included

        Returns:
            Set of class IRIs, never including the class itself or owl:Nothing
        """
        self._check_active()
        return self._subclasses_of(class_iri, direct)

    def dispose(self) -> None:
        """Release the reasoner's resources. Calling it again has no effect."""
        if self._disposed:
            return
        self._disposed = True
        self._release()

    @abstractmethod
    def _instances_of(self, class_iri: URIRef, direct: bool) -> Set[URIRef]:
        pass

    @abstractmethod
    def _subclasses_of(self, class_iri: URIRef, direct: bool) -> Set[URIRef]:
        pass

    def _release(self) -> None:
        """Hook for subclasses holding external resources."""


class ReasonerFactory(ABC):
    """Abstract base class for reasoner factories."""

    name = "abstract"

    @abstractmethod
    def create_reasoner(self, store: OntologyStore) -> Reasoner:
        """
        Create and classify a reasoner over an ontology.

        Args:
            store: Loaded ontology

        Returns:
            A classified Reasoner owned by the caller

        Raises:
            ReasonerFailure: If the reasoner cannot be built or classification fails
        """
        pass
