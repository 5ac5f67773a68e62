"""
Resolution reports: the phylogeny nodes matched by every phyloreference.
"""

import json
import logging
from contextlib import contextmanager
from typing import Dict, Iterator, Optional, Set

from ontology.labels import get_labels_in_english
from ontology.store import OntologyStore
from ontology.vocabulary import DEFAULT_URI_PREFIX
from reasoning.base import Reasoner, ReasonerFactory, ReasonerFailure
from .classifier import PhylorefClassifier

logger = logging.getLogger(__name__)

# Prefix-stripped phyloreference IRI -> prefix-stripped node IRIs
ResolutionMap = Dict[str, Set[str]]


@contextmanager
def reasoner_scope(factory: ReasonerFactory, store: OntologyStore) -> Iterator[Reasoner]:
    """Create a reasoner over `store` and dispose of it when the block exits.

    A reasoner that could not be created is never disposed.

    Raises:
        ReasonerFailure: If the factory fails
    """
    try:
        reasoner = factory.create_reasoner(store)
    except ReasonerFailure:
        raise
    except Exception as exc:
        raise ReasonerFailure(f"Could not create reasoner '{factory.name}': {exc}") from exc

    try:
        yield reasoner
    finally:
        reasoner.dispose()


class ResolutionReportBuilder:
    """Resolves every phyloreference in an ontology."""

    def __init__(self, default_prefix: str = DEFAULT_URI_PREFIX,
                 classifier: Optional[PhylorefClassifier] = None):
        """Initialize the report builder.

        Args:
            default_prefix: Prefix stripped from phyloreference and node IRIs
            classifier: Optional classifier. If None, creates one using default_prefix.
        """
        self.classifier = classifier if classifier is not None else PhylorefClassifier(default_prefix)

    def build_report(self, store: OntologyStore, reasoner_factory: ReasonerFactory) -> ResolutionMap:
        """Build the resolution map for an ontology.

        The reasoner is created from `reasoner_factory`, owned by this call,
        and disposed before returning or raising.

        Returns:
            One entry per phyloreference; node sets may be empty
        """
        report: ResolutionMap = {}

        with reasoner_scope(reasoner_factory, store) as reasoner:
            phylorefs = self.classifier.list_phyloreferences(store, reasoner)
            logger.info("Found %d phyloreference(s)", len(phylorefs))

            for phyloref in phylorefs:
                nodes = self.classifier.matched_nodes(phyloref, store, reasoner)
                key = self.classifier.strip_prefix(phyloref)
                report[key] = nodes

                labels = sorted(get_labels_in_english(phyloref, store.graph))
                logger.info("Phyloreference %s (%s) matched %d node(s)",
                            key, "; ".join(labels) or "unlabeled", len(nodes))

        return report

    @staticmethod
    def to_json(report: ResolutionMap, indent: Optional[int] = None) -> str:
        """Serialize a resolution map as a JSON object with sorted keys and node arrays."""
        return json.dumps(
            {key: sorted(nodes) for key, nodes in sorted(report.items())},
            indent=indent,
            ensure_ascii=False,
        )
