"""
In-memory RDF store holding the ontology being resolved.

The store loads an ontology (RDF/XML, JSON-LD or any other format rdflib
understands) into a single rdflib Graph, merges imported ontologies from a
directory of local copies, and answers the handful of asserted-axiom queries
the resolution pipeline needs. It never modifies the ontology after loading.
"""

import logging
import sys
from collections import deque
from pathlib import Path
from typing import Dict, List, Optional, Set, Union

from rdflib import Graph, URIRef
from rdflib.term import Node
from rdflib.util import guess_format

from .domain import OntologyStats
from .vocabulary import DEFAULT_URI_PREFIX, OBO, OWL, PHYLOREF, RDF, RDFS

logger = logging.getLogger(__name__)

# Files in the local ontologies directory that are considered ontology documents
ONTOLOGY_FILE_EXTENSIONS = (".owl", ".rdf", ".xml", ".ttl", ".nt", ".n3", ".json", ".jsonld")


class OntologyLoadError(Exception):
    """Base class for errors raised while reading an ontology."""


class InputNotFound(OntologyLoadError):
    """The input file or stream could not be opened."""


class OntologyParseFailure(OntologyLoadError):
    """The input could not be parsed as an ontology."""


class OntologyStore:
    """Read-only view over a loaded ontology graph."""

    def __init__(self, graph: Optional[Graph] = None,
                 base_iri: str = DEFAULT_URI_PREFIX,
                 ontologies_dir: Optional[Union[str, Path]] = None,
                 follow_remote_imports: bool = False):
        """Initialize the ontology store.

        Args:
            graph: Optional pre-populated graph. If None, creates an empty one.
            base_iri: Base IRI used to resolve relative IRIs in the input
            ontologies_dir: Directory holding local copies of imported ontologies
            follow_remote_imports: Fetch imports without a local copy from the web
        """
        self.graph = graph if graph is not None else Graph()
        self.base_iri = base_iri
        self.ontologies_dir = Path(ontologies_dir) if ontologies_dir else None
        self.follow_remote_imports = follow_remote_imports
        self._local_ontologies: Optional[Dict[URIRef, Path]] = None

        self._init_namespaces()

    def _init_namespaces(self):
        """Bind the prefixes used in log output and serializations."""
        self.graph.bind("owl", OWL)
        self.graph.bind("rdfs", RDFS)
        self.graph.bind("obo", OBO)
        self.graph.bind("phyloref", PHYLOREF)

    # Loading

    @staticmethod
    def detect_format(input_name: str, jsonld: bool = False) -> str:
        """Pick the rdflib parser for an input name.

        Files ending in .json or .jsonld are always JSON-LD. Other files are
        guessed from their extension; anything unrecognised (including
        standard input) is treated as RDF/XML.
        """
        lowercase = input_name.lower()
        if jsonld or lowercase.endswith(".json") or lowercase.endswith(".jsonld"):
            return "json-ld"
        if input_name == "-":
            return "xml"
        return guess_format(input_name) or "xml"

    def load(self, input_name: str, jsonld: bool = False) -> "OntologyStore":
        """Load an ontology from a file name, or from standard input when given "-".

        Raises:
            InputNotFound: If the file cannot be opened
            OntologyParseFailure: If the content (or an import) cannot be parsed
        """
        rdf_format = self.detect_format(input_name, jsonld)
        logger.info("Input: %s", input_name)

        if input_name == "-":
            self._parse(sys.stdin.buffer, rdf_format, "<stdin>")
        else:
            try:
                stream = open(input_name, "rb")
            except OSError as exc:
                raise InputNotFound(f"Could not open input file '{input_name}': {exc}") from exc
            with stream:
                self._parse(stream, rdf_format, input_name)

        self.resolve_imports()
        logger.info("Loaded ontology: %s", self.stats())
        return self

    def _parse(self, source, rdf_format: str, input_name: str):
        try:
            self.graph.parse(source=source, format=rdf_format, publicID=self.base_iri)
        except Exception as exc:
            raise OntologyParseFailure(
                f"Could not read and load ontology '{input_name}': {exc}"
            ) from exc

    def find_local_ontologies(self) -> Dict[URIRef, Path]:
        """Map ontology IRIs to the files in the local ontologies directory that declare them."""
        if self._local_ontologies is not None:
            return self._local_ontologies

        self._local_ontologies = {}
        if self.ontologies_dir is not None and self.ontologies_dir.is_dir():
            for path in sorted(self.ontologies_dir.rglob("*")):
                if path.suffix.lower() not in ONTOLOGY_FILE_EXTENSIONS:
                    continue
                local_graph = Graph()
                try:
                    local_graph.parse(str(path), format=self.detect_format(str(path)))
                except Exception as exc:
                    logger.warning("Ignoring unreadable local ontology %s: %s", path, exc)
                    continue
                for ontology_iri in local_graph.subjects(RDF.type, OWL.Ontology):
                    if isinstance(ontology_iri, URIRef):
                        self._local_ontologies[ontology_iri] = path
                for version_iri in local_graph.objects(None, OWL.versionIRI):
                    if isinstance(version_iri, URIRef):
                        self._local_ontologies.setdefault(version_iri, path)

        logger.info("Found local ontologies: %s", sorted(str(iri) for iri in self._local_ontologies))
        return self._local_ontologies

    def resolve_imports(self) -> List[URIRef]:
        """Merge every owl:imports target into the graph, transitively.

        Imports with a local copy are read from disk. Other imports are
        fetched only if follow_remote_imports is set, and skipped otherwise.

        Returns:
            IRIs of the ontologies that were merged
        """
        pending = deque(self.graph.objects(None, OWL.imports))
        if not pending:
            return []

        local_ontologies = self.find_local_ontologies()
        seen: Set[Node] = set()
        merged: List[URIRef] = []

        while pending:
            import_iri = pending.popleft()
            if import_iri in seen or not isinstance(import_iri, URIRef):
                continue
            seen.add(import_iri)

            local_path = local_ontologies.get(import_iri)
            if local_path is not None:
                source, rdf_format = str(local_path), self.detect_format(str(local_path))
            elif self.follow_remote_imports:
                source, rdf_format = str(import_iri), None
            else:
                logger.warning("No local copy of imported ontology %s, skipping it", import_iri)
                continue

            imported = Graph()
            try:
                imported.parse(source, format=rdf_format)
            except Exception as exc:
                raise OntologyParseFailure(
                    f"Could not load imported ontology '{import_iri}': {exc}"
                ) from exc

            self.graph += imported
            merged.append(import_iri)
            pending.extend(imported.objects(None, OWL.imports))
            logger.info("Imported ontology %s from %s", import_iri, source)

        return merged

    # Queries over asserted axioms

    def asserted_types(self, individual: Node) -> Set[Node]:
        """All class expressions asserted as rdf:type of an individual.

        Named classes are URIRefs; anonymous class expressions are blank nodes.
        """
        return set(self.graph.objects(individual, RDF.type))

    def named_classes(self) -> Set[URIRef]:
        """All classes declared with an IRI."""
        return {
            cls for cls in self.graph.subjects(RDF.type, OWL.Class)
            if isinstance(cls, URIRef)
        }

    def named_individuals(self) -> Set[URIRef]:
        """All individuals declared as owl:NamedIndividual."""
        return {
            ind for ind in self.graph.subjects(RDF.type, OWL.NamedIndividual)
            if isinstance(ind, URIRef)
        }

    def classes_typed_as(self, class_iri: URIRef) -> Set[URIRef]:
        """Named classes that are also asserted to be instances of `class_iri` (punning)."""
        return {
            entity for entity in self.graph.subjects(RDF.type, class_iri)
            if isinstance(entity, URIRef) and (entity, RDF.type, OWL.Class) in self.graph
        }

    def direct_subclasses(self, class_iri: URIRef) -> Set[URIRef]:
        """Named classes asserted as rdfs:subClassOf or owl:equivalentClass of `class_iri`."""
        children = set(self.graph.subjects(RDFS.subClassOf, class_iri))
        children.update(self.graph.subjects(OWL.equivalentClass, class_iri))
        children.update(self.graph.objects(class_iri, OWL.equivalentClass))
        return {child for child in children if isinstance(child, URIRef) and child != class_iri}

    def subclass_closure(self, class_iri: URIRef) -> Set[URIRef]:
        """All named classes reachable downwards from `class_iri`, excluding itself."""
        found: Set[URIRef] = set()
        pending = deque([class_iri])
        while pending:
            current = pending.popleft()
            for child in self.direct_subclasses(current):
                if child not in found and child != class_iri:
                    found.add(child)
                    pending.append(child)
        return found

    def ontology_iris(self) -> List[URIRef]:
        return [iri for iri in self.graph.subjects(RDF.type, OWL.Ontology) if isinstance(iri, URIRef)]

    def stats(self) -> OntologyStats:
        """Get basic statistics about the ontology."""
        ontology_iris = self.ontology_iris()
        return OntologyStats(
            total_triples=len(self.graph),
            total_classes=len(self.named_classes()),
            total_individuals=len(self.named_individuals()),
            total_imports=len(set(self.graph.objects(None, OWL.imports))),
            ontology_iri=str(ontology_iris[0]) if ontology_iris else None,
        )

    def to_ntriples(self, exclude_imports: bool = True) -> bytes:
        """Serialize the graph as N-Triples, optionally without owl:imports statements."""
        export = Graph()
        for triple in self.graph:
            if exclude_imports and triple[1] == OWL.imports:
                continue
            export.add(triple)
        return export.serialize(format="nt", encoding="utf-8")
