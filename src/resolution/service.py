"""
High-level resolution service providing the public interface of the pipeline.

Loads an ontology, classifies it with the configured reasoner, and builds
the resolution report.
"""

import logging
from typing import Optional

from ontology.store import OntologyStore
from reasoning.registry import ReasonerRegistry
from .config import ResolverSettings
from .report import ResolutionMap, ResolutionReportBuilder

logger = logging.getLogger(__name__)


class ResolutionService:
    """Resolves the phyloreferences in ontology files."""

    def __init__(self, settings: Optional[ResolverSettings] = None,
                 registry: Optional[ReasonerRegistry] = None):
        """Initialize the resolution service.

        Args:
            settings: Optional settings. If None, uses the defaults.
            registry: Optional reasoner registry. If None, creates one.
        """
        self.settings = settings if settings is not None else ResolverSettings()
        self.registry = registry if registry is not None else ReasonerRegistry(java_exe=self.settings.java_exe)
        self.builder = ResolutionReportBuilder(self.settings.default_prefix)

    def load_ontology(self, input_name: str, jsonld: bool = False) -> OntologyStore:
        """Load an ontology file (or standard input, for "-")."""
        store = OntologyStore(
            base_iri=self.settings.default_prefix,
            ontologies_dir=self.settings.ontologies_dir,
            follow_remote_imports=self.settings.follow_remote_imports,
        )
        return store.load(input_name, jsonld=jsonld)

    def resolve_store(self, store: OntologyStore, reasoner: Optional[str] = None) -> ResolutionMap:
        """Resolve the phyloreferences of an already loaded ontology.

        Raises:
            ValueError: If the reasoner name is unknown
            ReasonerFailure: If classification fails
        """
        factory = self.registry.get_factory(reasoner or self.settings.reasoner)
        logger.info("Using reasoner: %s", factory.name)
        return self.builder.build_report(store, factory)

    def resolve(self, input_name: str, jsonld: bool = False, reasoner: Optional[str] = None) -> ResolutionMap:
        """Load an ontology and resolve its phyloreferences."""
        store = self.load_ontology(input_name, jsonld=jsonld)
        return self.resolve_store(store, reasoner=reasoner)

    def resolve_to_json(self, input_name: str, jsonld: bool = False, reasoner: Optional[str] = None) -> str:
        return self.builder.to_json(self.resolve(input_name, jsonld=jsonld, reasoner=reasoner))
