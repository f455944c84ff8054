"""CLI interface for direction resolution and OGM validation."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from ..ai.ogm_tool import describe_result
from ..config import get_app_version, get_log_level, get_profile_name
from ..config.profile_loader import list_available_profiles
from ..config.profile_manager import set_profile
from ..engines import Engines, create_engines
from ..models.direction import DirectionResolution
from ..pipeline.parsing import (
    DocumentParseError,
    extraction_from_dict,
    person_names_from_list,
    tenant_from_dict,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_BAD_INPUT = 2


def load_document(path: Path) -> Dict:
    """Read a document JSON file for the direction command.

    Expected shape:
        {"tenant": {...}, "extraction": {"kind": ..., ...},
         "associated_person_names": [...]}

    Raises:
        DocumentParseError: If the file is not valid JSON or lacks required keys
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise DocumentParseError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise DocumentParseError(f"{path} must contain a JSON object")
    for key in ("tenant", "extraction"):
        if key not in data:
            raise DocumentParseError(f"{path} is missing '{key}'")
    return data


def resolve_document(engines: Engines, data: Dict) -> DirectionResolution:
    """Parse a document dict and resolve its direction."""
    tenant = tenant_from_dict(data["tenant"])
    extraction = extraction_from_dict(data["extraction"])
    names = person_names_from_list(data.get("associated_person_names"))
    return engines.direction.resolve(extraction, tenant, names)


def _format_resolution(resolution: DirectionResolution) -> str:
    lines = [
        f"Direction:    {resolution.direction.value}",
        f"Source:       {resolution.source.value}",
        f"Confidence:   {resolution.confidence:.2f}",
    ]
    if resolution.matched_field:
        lines.append(f"Matched:      {resolution.matched_field} = {resolution.matched_value}")
    if resolution.counterparty_vat:
        lines.append(f"Counterparty: {resolution.counterparty_vat}")
    lines.append(f"Reasoning:    {resolution.reasoning}")
    return "\n".join(lines)


def _handle_ogm(args: argparse.Namespace, engines: Engines) -> int:
    result = engines.ogm.validate(args.reference)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(describe_result(result))
    return EXIT_OK if result.is_valid else EXIT_INVALID


def _handle_direction(args: argparse.Namespace, engines: Engines) -> int:
    try:
        data = load_document(Path(args.document))
        resolution = resolve_document(engines, data)
    except (DocumentParseError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if args.json:
        print(json.dumps(resolution.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(_format_resolution(resolution))
    return EXIT_OK


def _handle_serve(args: argparse.Namespace, engines: Engines) -> int:
    import uvicorn

    from ..api.main import create_app

    uvicorn.run(create_app(engines), host=args.host, port=args.port)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docfacts",
        description="Resolve document direction and validate Belgian structured payment references",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_app_version()}")
    parser.add_argument(
        "--profile",
        type=str,
        default=None,
        help="Configuration profile name (default: DOCFACTS_PROFILE or 'default')"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose debug output"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    ogm = subparsers.add_parser("ogm", help="Validate a structured communication (+++XXX/XXXX/XXXXX+++)")
    ogm.add_argument("reference", help="Reference as read from the document")
    ogm.add_argument("--json", action="store_true", help="Print the structured result as JSON")

    direction = subparsers.add_parser("direction", help="Resolve direction for a document JSON file")
    direction.add_argument("document", help="Path to JSON with tenant, extraction, associated_person_names")
    direction.add_argument("--json", action="store_true", help="Print the resolution as JSON")

    subparsers.add_parser("profiles", help="List available configuration profiles")

    serve = subparsers.add_parser("serve", help="Run the HTTP API (requires the 'api' extra)")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_log_level(args.verbose), format="%(message)s")

    if args.command == "profiles":
        for name in list_available_profiles():
            print(name)
        return EXIT_OK

    profile_name = args.profile or get_profile_name()
    try:
        profile = set_profile(profile_name)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    engines = create_engines(profile)
    logger.debug(f"Using profile '{profile.name}'")

    handlers = {
        "ogm": _handle_ogm,
        "direction": _handle_direction,
        "serve": _handle_serve,
    }
    return handlers[args.command](args, engines)


if __name__ == "__main__":
    sys.exit(main())
