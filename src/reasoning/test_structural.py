"""
Unit test for the told-axioms reasoner.

HOW TO RUN:
The virtual environment .venv should be activated before running the tests.

From the src directory, run:
    python -m reasoning.test_structural

Or from the project root:
    cd src; python -m reasoning.test_structural
"""

from rdflib import BNode, Graph, URIRef
from rdflib.namespace import OWL, RDF, RDFS

from ontology.store import OntologyStore
from .base import CallerContractViolation
from .structural import StructuralReasoner, StructuralReasonerFactory

EX = "http://example.org/jphyloref#"
CLADE = URIRef(EX + "Clade")
SUBCLADE = URIRef(EX + "Subclade")
NODE1 = URIRef(EX + "node1")
NODE2 = URIRef(EX + "node2")
NODE3 = URIRef(EX + "node3")


def create_store() -> OntologyStore:
    """Create a store with a two-level class hierarchy and three individuals."""
    graph = Graph()
    graph.add((CLADE, RDF.type, OWL.Class))
    graph.add((SUBCLADE, RDF.type, OWL.Class))
    graph.add((SUBCLADE, RDFS.subClassOf, CLADE))
    graph.add((NODE1, RDF.type, CLADE))
    graph.add((NODE2, RDF.type, SUBCLADE))
    graph.add((NODE3, RDF.type, OWL.NamedIndividual))
    graph.add((BNode(), RDF.type, CLADE))
    return OntologyStore(graph=graph)


def test_indirect_instances():
    """Test that instances of subclasses are included by default."""
    print("Testing indirect instances...")

    reasoner = StructuralReasonerFactory().create_reasoner(create_store())

    assert reasoner.instances_of(CLADE) == {NODE1, NODE2}
    assert reasoner.instances_of(SUBCLADE) == {NODE2}

    print("✓ Indirect instances working correctly")


def test_direct_instances():
    """Test that direct queries only return directly asserted instances."""
    print("Testing direct instances...")

    reasoner = StructuralReasoner(create_store())

    assert reasoner.instances_of(CLADE, direct=True) == {NODE1}

    print("✓ Direct instances working correctly")


def test_subclasses():
    """Test subclass queries."""
    print("Testing subclasses...")

    reasoner = StructuralReasoner(create_store())

    assert reasoner.subclasses_of(CLADE) == {SUBCLADE}
    assert reasoner.subclasses_of(SUBCLADE) == set()
    assert reasoner.subclasses_of(URIRef(EX + "Unknown")) == set()

    print("✓ Subclasses working correctly")


def test_dispose():
    """Test that a disposed reasoner refuses queries and disposal is idempotent."""
    print("Testing disposal...")

    reasoner = StructuralReasoner(create_store())
    reasoner.dispose()
    reasoner.dispose()

    assert reasoner.is_disposed
    for query in (reasoner.instances_of, reasoner.subclasses_of):
        try:
            query(CLADE)
            assert False, "Expected CallerContractViolation"
        except CallerContractViolation:
            pass

    print("✓ Disposal working correctly")


def run_all_tests():
    """Run all test functions."""
    print("=" * 50)
    print("Running StructuralReasoner Tests")
    print("=" * 50)

    test_functions = [
        test_indirect_instances,
        test_direct_instances,
        test_subclasses,
        test_dispose,
    ]

    passed = 0
    failed = 0

    for test_func in test_functions:
        try:
            test_func()
            passed += 1
        except Exception as e:
            print(f"✗ {test_func.__name__} FAILED: {e}")
            failed += 1

    print("=" * 50)
    print(f"Test Results: {passed} passed, {failed} failed")
    print("=" * 50)

    return failed == 0


def main():
    """Main function to run the tests."""
    success = run_all_tests()
    if success:
        print("All tests passed!")
        return 0
    else:
        print("Some tests failed!")
        return 1


if __name__ == "__main__":
    exit(main())
