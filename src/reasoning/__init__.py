"""
Reasoning Module

Reasoners classify a loaded ontology and answer instance and subclass
queries over the result.

Public Interface:
- ReasonerRegistry: Selects a ReasonerFactory by name
- Reasoner, ReasonerFactory: Interfaces used by the resolution pipeline
- ReasonerFailure, CallerContractViolation: Errors raised by reasoners
"""

from .base import CallerContractViolation, Reasoner, ReasonerFactory, ReasonerFailure
from .registry import DEFAULT_REASONER, ReasonerRegistry

__all__ = [
    "Reasoner",
    "ReasonerFactory",
    "ReasonerFailure",
    "CallerContractViolation",
    "ReasonerRegistry",
    "DEFAULT_REASONER",
]
