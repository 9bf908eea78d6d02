"""
Command line interface for fairnotes.

Reads a career-fair employer export and writes a vault: a copy of the
template directory whose ``classes/company.md`` fileClass gains the
generated fields, plus one Markdown note per employer under
``companies/``.  Without ``--output`` (or with ``--no-output``) the
input and template are validated and nothing is written.

Usage:
    fairnotes -i export.json -o ~/vaults/career_fair
    fairnotes -i export.json -t ./my_template -o ./out --id-strategy unique
    fairnotes -i export.json            # validate only
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from .config import load_settings
from .errors import FairnotesError
from .fileclass.ids import ID_STRATEGIES
from .ingest import extract_companies, load_input
from .vault import build_vault, prepare_schema

logger = logging.getLogger("fairnotes.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fairnotes",
        description="Convert a career-fair employer export into vault notes",
    )
    parser.add_argument("-i", "--input", required=True, help="Path to the employer JSON export")
    parser.add_argument("-o", "--output", help="Output vault directory (must not exist); omit to validate only")
    parser.add_argument("-t", "--template", help="Vault template directory (default: built-in career_fair_2025)")
    parser.add_argument("-c", "--config", help="YAML settings file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print diagnostic output")
    parser.add_argument(
        "--no-output",
        dest="no_output",
        action="store_true",
        help="Validate the input and template without writing, even if --output is given",
    )
    parser.add_argument(
        "--skip-invalid",
        dest="skip_invalid",
        action="store_true",
        default=None,
        help="Skip employer entries that fail validation instead of aborting",
    )
    parser.add_argument(
        "--id-strategy",
        dest="id_strategy",
        choices=ID_STRATEGIES,
        help="How ids for generated schema fields are chosen (default: legacy)",
    )
    return parser


def run(args: argparse.Namespace) -> int:
    """Execute one conversion described by parsed `args`."""
    settings = load_settings(
        args.config,
        template=args.template,
        id_strategy=args.id_strategy,
        skip_invalid=args.skip_invalid,
    )
    document = load_input(args.input)
    companies = extract_companies(document, skip_invalid=settings.skip_invalid)
    logger.info("rendering data for %d companies", len(companies))

    if args.no_output or not args.output:
        prepare_schema(settings)
        logger.info("Template %s is valid; exiting with no output", settings.template)
        return 0

    report = build_vault(companies, args.output, settings)
    logger.info("Vault written to %s (%d notes)", args.output, report.total)
    return 0


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    try:
        return run(args)
    except FairnotesError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
