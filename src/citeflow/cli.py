"""
Command line entry point for citeflow.
"""

from __future__ import annotations

import argparse
import json
from importlib.metadata import PackageNotFoundError, version

from pydantic import TypeAdapter, ValidationError

from citeflow import citation_flow, detect_and_strip_citations, parse_inline_nodes, parse_inline_paragraphs
from citeflow.logging import configure_logging, logger
from citeflow.models import FlowItem, InlineNode

_VERBOSITY_LEVELS = {1: "INFO", 2: "DEBUG"}
_flow_adapter = TypeAdapter(list[FlowItem])


def _add_input_arguments(command: argparse.ArgumentParser) -> None:
    source = command.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--markdown",
        help="Markdown text; every paragraph, heading and table cell is processed separately.",
    )
    source.add_argument(
        "--nodes",
        help="One sibling inline node sequence as a JSON array of node objects.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="citeflow",
        description="citeflow CLI.",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print the installed citeflow version and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Emit logs on stderr (-v INFO, -vv DEBUG).",
    )
    parser.add_argument(
        "--log-level",
        help="Explicit log level (e.g. DEBUG, WARNING). Overrides -v.",
    )
    subparsers = parser.add_subparsers(dest="command")
    detect = subparsers.add_parser(
        "detect",
        help="Detect parenthesised citation links and strip their parentheses.",
    )
    _add_input_arguments(detect)
    flow = subparsers.add_parser(
        "flow",
        help="Build the renderer link flow with citation flags.",
    )
    _add_input_arguments(flow)
    return parser


def _resolve_log_level(args: argparse.Namespace) -> str | None:
    if args.log_level:
        return args.log_level
    if args.verbose:
        return _VERBOSITY_LEVELS.get(min(args.verbose, 2))
    return None


def _load_blocks(parser: argparse.ArgumentParser, args: argparse.Namespace) -> list[list[InlineNode]]:
    if args.markdown is not None:
        return parse_inline_paragraphs(args.markdown)

    try:
        payload = json.loads(args.nodes)
    except json.JSONDecodeError as exc:
        parser.error(f"Failed to parse --nodes JSON: {exc}")
    if not isinstance(payload, list):
        parser.error("--nodes must be a JSON array")
    try:
        return [parse_inline_nodes(payload)]
    except ValidationError as exc:
        parser.error(f"Invalid --nodes payload: {exc}")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(_resolve_log_level(args))

    if args.version:
        try:
            print(version("citeflow"))
        except PackageNotFoundError:
            print("citeflow (not installed)")
        return 0

    if args.command is None:
        parser.print_help()
        return 0

    blocks = _load_blocks(parser, args)
    logger.info(f"Processing {len(blocks)} inline block(s)")

    if args.command == "detect":
        output = [detect_and_strip_citations(nodes).model_dump(mode="json") for nodes in blocks]
    else:
        output = [_flow_adapter.dump_python(citation_flow(nodes), mode="json") for nodes in blocks]

    print(json.dumps({"blocks": output}, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
