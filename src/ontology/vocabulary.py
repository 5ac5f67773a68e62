"""
OWL and phyloreferencing terms used when resolving phyloreferences.
"""

from rdflib import Namespace, URIRef
from rdflib.namespace import OWL, RDF, RDFS

# Namespaces
PHYLOREF = Namespace("http://ontology.phyloref.org/phyloref.owl#")
OBO = Namespace("http://purl.obolibrary.org/obo/")

# Classes that phyloreferences are subclasses (or instances) of
PHYLOREFERENCE = PHYLOREF.Phyloreference

# Marker class for phylogeny nodes
CDAO_NODE = OBO.CDAO_0000140  # cdao:Node

# Base IRI for JSON-LD input and the prefix stripped from reported identifiers
DEFAULT_URI_PREFIX = "http://example.org/jphyloref"

# Annotation property used for human-readable names
LABEL = RDFS.label

__all__ = [
    "PHYLOREF", "OBO", "PHYLOREFERENCE", "CDAO_NODE",
    "DEFAULT_URI_PREFIX", "LABEL",
    "OWL", "RDF", "RDFS", "URIRef",
]
