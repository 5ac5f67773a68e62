#!/usr/bin/env python3
"""
Resolve the phyloreferences in an ontology and report their resolution in JSON.

HOW TO RUN:
The virtual environment .venv should be activated before running the script.

From the src directory, run:
    python resolve_phylorefs.py <input.owl>

Examples:
    python resolve_phylorefs.py -i phylorefs.owl
    python resolve_phylorefs.py phylorefs.jsonld --reasoner pellet
    cat phylorefs.json | python resolve_phylorefs.py --jsonld -

The report is a JSON object on standard output mapping every phyloreference
to the phylogeny nodes it resolves to. Progress and errors are written to
standard error; the exit code is non-zero if anything went wrong, in which
case nothing is written to standard output.
"""

import argparse
import logging
import sys
from typing import List, Optional

from ontology.store import OntologyLoadError
from reasoning.base import ReasonerFailure
from resolution.config import ResolverSettings
from resolution.report import ResolutionReportBuilder
from resolution.service import ResolutionService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve phyloreferences in the input ontology and report on their resolution in JSON.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Resolve an RDF/XML ontology with HermiT
  python resolve_phylorefs.py -i phylorefs.owl

  # Resolve a JSON-LD file read from standard input with Pellet
  python resolve_phylorefs.py --jsonld --reasoner pellet -

Settings can also be given as JPHYLOREF_* environment variables or in a .env file.
        """
    )

    parser.add_argument(
        "input_file",
        nargs="?",
        help="The input ontology (same as --input); '-' reads standard input"
    )

    parser.add_argument(
        "-i", "--input",
        help="The input ontology to read in RDF/XML or JSON-LD (can also be provided without the '-i')."
    )

    parser.add_argument(
        "-j", "--jsonld",
        action="store_true",
        help="Treat the input file as a JSON-LD file. Files with a '.json' or '.jsonld' extension "
             "will automatically be treated as a JSON-LD file."
    )

    parser.add_argument(
        "--reasoner",
        help="Reasoner to classify the ontology with: hermit, pellet or structural (default: hermit)"
    )

    parser.add_argument(
        "--default-prefix",
        help="Base IRI for JSON-LD input, stripped from the reported IRIs"
    )

    parser.add_argument(
        "--ontologies-dir",
        help="Directory holding local copies of imported ontologies (default: ontologies)"
    )

    parser.add_argument(
        "--follow-remote-imports",
        action="store_true",
        default=None,
        help="Download imported ontologies that have no local copy"
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only report warnings and errors on standard error"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    input_name = args.input or args.input_file
    if input_name is None:
        parser.error("no input ontology specified (use '-i input.owl')")

    try:
        settings = ResolverSettings.from_env(
            default_prefix=args.default_prefix,
            reasoner=args.reasoner,
            ontologies_dir=args.ontologies_dir,
            follow_remote_imports=args.follow_remote_imports,
            log_level="WARNING" if args.quiet else None,
        )
    except ValueError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(level=settings.log_level, format="%(levelname)s: %(message)s", stream=sys.stderr)

    service = ResolutionService(settings)
    if not service.registry.has_factory(settings.reasoner):
        print(f"Error: unknown reasoner '{settings.reasoner}' "
              f"(available: {', '.join(service.registry.get_available_names())})", file=sys.stderr)
        return 2

    try:
        report = service.resolve(input_name, jsonld=args.jsonld)
    except (OntologyLoadError, ReasonerFailure) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(ResolutionReportBuilder.to_json(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
