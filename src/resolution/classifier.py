"""
Identification of phyloreferences and the phylogeny nodes they resolve to.
"""

from typing import Set

from rdflib import URIRef
from rdflib.term import Node

from ontology.store import OntologyStore
from ontology.vocabulary import CDAO_NODE, DEFAULT_URI_PREFIX, OWL, PHYLOREFERENCE
from reasoning.base import Reasoner


def strip_prefix(iri: str, prefix: str) -> str:
    """Remove `prefix` from the start of `iri` if present (plain string match)."""
    if prefix and iri.startswith(prefix):
        return iri[len(prefix):]
    return iri


class PhylorefClassifier:
    """Finds phyloreferences in a classified ontology and the nodes each one matches."""

    def __init__(self, default_prefix: str = DEFAULT_URI_PREFIX,
                 phyloref_class: URIRef = PHYLOREFERENCE,
                 node_class: URIRef = CDAO_NODE):
        self.default_prefix = default_prefix
        self.phyloref_class = phyloref_class
        self.node_class = node_class

    def strip_prefix(self, iri: Node) -> str:
        return strip_prefix(str(iri), self.default_prefix)

    def list_phyloreferences(self, store: OntologyStore, reasoner: Reasoner) -> Set[URIRef]:
        """
        List the phyloreferences in an ontology.

        A phyloreference is a named class that the reasoner places below
        phyloref:Phyloreference, or a named class asserted to be an instance
        of it.

        Returns:
            Set of phyloreference class IRIs, in no particular order
        """
        phylorefs = set(reasoner.subclasses_of(self.phyloref_class, direct=False))
        phylorefs |= store.classes_typed_as(self.phyloref_class)
        phylorefs -= {self.phyloref_class, OWL.Nothing}
        return phylorefs

    def is_phylogeny_node(self, individual: Node, store: OntologyStore) -> bool:
        """
        Check whether an individual may be reported as a phylogeny node.

        True if any asserted type is the node class, or is an anonymous class
        expression. Anonymous types cannot be compared with the node class,
        so individuals carrying one are kept rather than dropped.
        """
        return any(
            not isinstance(type_, URIRef) or type_ == self.node_class
            for type_ in store.asserted_types(individual)
        )

    def matched_nodes(self, phyloref: URIRef, store: OntologyStore, reasoner: Reasoner) -> Set[str]:
        """
        Get the phylogeny nodes a phyloreference resolves to.

        Args:
            phyloref: IRI of the phyloreference class
            store: Ontology the reasoner was built over
            reasoner: Classified reasoner

        Returns:
            Set of node IRIs with the default prefix stripped; may be empty
        """
        # Instances include the phyloreference itself when it is punned as an
        # individual, so only keep individuals typed as phylogeny nodes.
        return {
            self.strip_prefix(individual)
            for individual in reasoner.instances_of(phyloref, direct=False)
            if self.is_phylogeny_node(individual, store)
        }
