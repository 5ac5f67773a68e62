"""
Phyloreference Resolution Module

This module determines which phylogeny nodes each phyloreference in a
classified ontology resolves to.

Public Interface:
- ResolutionService: Loads, classifies and resolves an ontology
- ResolutionReportBuilder: Builds the phyloreference -> nodes map
- PhylorefClassifier: Lists phyloreferences and their matched nodes
- ResolverSettings: Configuration from the environment
"""

from .classifier import PhylorefClassifier, strip_prefix
from .config import ResolverSettings
from .report import ResolutionMap, ResolutionReportBuilder, reasoner_scope
from .service import ResolutionService

__all__ = [
    "ResolutionService",
    "ResolutionReportBuilder",
    "ResolutionMap",
    "PhylorefClassifier",
    "ResolverSettings",
    "reasoner_scope",
    "strip_prefix",
]
