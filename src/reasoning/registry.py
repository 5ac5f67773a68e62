"""
Reasoner registry for selecting reasoner factories by name.

This module provides a registry of available reasoners, so the reasoner used
for classification can be chosen on the command line or in the settings.
"""

from typing import Dict, List, Optional

from .base import ReasonerFactory
from .owlready import OwlreadyReasonerFactory
from .structural import StructuralReasonerFactory

DEFAULT_REASONER = "hermit"


class ReasonerRegistry:
    """
    Registry for available reasoners and their factories.

    Provides a pluggable architecture for different reasoners while keeping
    a consistent interface for creating them.
    """

    def __init__(self, java_exe: Optional[str] = None):
        """Initialize the registry with the default reasoner factories."""
        self._factories: Dict[str, ReasonerFactory] = {
            'hermit': OwlreadyReasonerFactory('hermit', java_exe=java_exe),
            'pellet': OwlreadyReasonerFactory('pellet', java_exe=java_exe),
            'structural': StructuralReasonerFactory(),
        }

    def register_factory(self, name: str, factory: ReasonerFactory) -> None:
        """
        Register a new reasoner factory.

        Args:
            name: Name the reasoner is selected by
            factory: ReasonerFactory instance
        """
        self._factories[name.lower()] = factory

    def get_factory(self, name: str) -> ReasonerFactory:
        """
        Get the factory for the named reasoner.

        Args:
            name: Reasoner name (case-insensitive)

        Returns:
            ReasonerFactory instance

        Raises:
            ValueError: If no reasoner is registered under that name
        """
        factory = self._factories.get(name.lower())
        if factory is None:
            raise ValueError(
                f"Unknown reasoner '{name}'. Available reasoners: {', '.join(self.get_available_names())}"
            )
        return factory

    def get_available_names(self) -> List[str]:
        """Get list of available reasoner names."""
        return list(self._factories.keys())

    def has_factory(self, name: str) -> bool:
        return name.lower() in self._factories
