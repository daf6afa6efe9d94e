"""
Command-line interface for inspecting a plWordNet XML file.
"""
from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import yaml

from plwordnet import __version__
from plwordnet.config import LoaderConfig, default_source, load_config
from plwordnet.exceptions import PlWordNetError
from plwordnet.graph import LexicalGraph

logger = logging.getLogger(__name__)


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the plwordnet CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        config = load_config(args.config) if args.config else LoaderConfig()
    except (PlWordNetError, FileNotFoundError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=args.log_level or config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    source = args.file or default_source()
    if source is None:
        print(
            "[ERROR] No input file: pass --file or set PLWORDNET_PATH",
            file=sys.stderr,
        )
        return 1

    try:
        graph = LexicalGraph.from_file(source, config)
    except PlWordNetError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    logger.debug("Running command %s", args.command)
    return args.func(graph, args)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="plwordnet",
        description="Query a plWordNet XML file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--file", "-f",
        type=Path,
        help="plWordNet XML file (default: $PLWORDNET_PATH)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML loader configuration",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json", "yaml"],
        default="text",
        help="Output format (default: text)",
    )

    subparsers = parser.add_subparsers(title="commands", dest="command")

    stats_parser = subparsers.add_parser(
        "stats",
        help="Show header fields and collection sizes",
    )
    stats_parser.set_defaults(func=cmd_stats)

    synset_parser = subparsers.add_parser(
        "synset",
        help="Show a synset with its member lexical units",
    )
    synset_parser.add_argument("id", type=int, help="Synset id")
    synset_parser.set_defaults(func=cmd_synset)

    unit_parser = subparsers.add_parser(
        "unit",
        help="Show a lexical unit",
    )
    unit_parser.add_argument("id", type=int, help="Lexical unit id")
    unit_parser.set_defaults(func=cmd_unit)

    relations_parser = subparsers.add_parser(
        "relations",
        help="List relations of one relation type",
    )
    relations_parser.add_argument("type_id", type=int, help="Relation type id")
    relations_parser.add_argument(
        "--kind",
        choices=["synset", "lexical"],
        default="synset",
        help="Edge list to search (default: synset)",
    )
    relations_parser.add_argument(
        "--limit",
        type=_positive_int,
        default=20,
        help="Maximum number of relations to show (default: 20)",
    )
    relations_parser.set_defaults(func=cmd_relations)

    simple_parser = subparsers.add_parser(
        "simple",
        help="Render synsets as comma-joined member names",
    )
    simple_parser.add_argument("ids", type=int, nargs="+", help="Synset ids")
    simple_parser.set_defaults(func=cmd_simple)

    return parser


def cmd_stats(graph: LexicalGraph, args: argparse.Namespace) -> int:
    """Handle stats command."""
    meta = graph.get_metadata()
    if args.format != "text":
        _emit(meta, args.format)
        return 0

    print(f"Owner:              {meta.owner}")
    print(f"Date:               {meta.date}")
    print(f"Version:            {meta.version}")
    print(f"Lexical units:      {meta.lexical_units}")
    print(f"Synsets:            {meta.synsets}")
    print(f"Relation types:     {meta.relation_types}")
    print(f"Lexical relations:  {meta.lexical_relations}")
    print(f"Synset relations:   {meta.synset_relations}")
    return 0


def cmd_synset(graph: LexicalGraph, args: argparse.Namespace) -> int:
    """Handle synset command."""
    synset = graph.get_synset(args.id)
    if synset is None:
        print(f"Synset {args.id} not found.")
        return 1
    if args.format != "text":
        _emit(synset, args.format)
        return 0

    print(f"\nSynset {synset.id} ({synset.language.display_name})")
    if synset.definition:
        print(f"  Definition: {synset.definition}")
    print(f"  Workstate: {synset.workstate}")
    print(f"  Abstract: {'yes' if synset.abstract else 'no'}")
    print(f"  Members ({len(synset.lexical_units)}):")
    for unit in synset.lexical_units:
        print(f"    {unit.id:<10} {unit.name} [{unit.pos}] v{unit.variant}")
    return 0


def cmd_unit(graph: LexicalGraph, args: argparse.Namespace) -> int:
    """Handle unit command."""
    unit = graph.get_lexical_unit(args.id)
    if unit is None:
        print(f"Lexical unit {args.id} not found.")
        return 1
    if args.format != "text":
        _emit(unit, args.format)
        return 0

    print(f"\nLexical unit {unit.id}: {unit.name} ({unit.language.display_name})")
    print(f"  POS: {unit.pos}")
    print(f"  Variant: {unit.variant}")
    print(f"  Domain: {unit.domain}")
    if unit.desc:
        print(f"  Description: {unit.desc}")
    return 0


def cmd_relations(graph: LexicalGraph, args: argparse.Namespace) -> int:
    """Handle relations command."""
    if args.kind == "synset":
        matches = graph.synset_relations_by_id(args.type_id)
    else:
        matches = graph.lexical_relations_by_id(args.type_id)

    shown = []
    for relation in matches:
        if len(shown) >= args.limit:
            break
        shown.append(relation)

    if args.format != "text":
        _emit(shown, args.format)
        return 0

    relation_type = graph.get_relation_type(args.type_id)
    name = relation_type.name if relation_type else "(unknown type)"
    print(f"\n{args.kind.capitalize()} relations of type {args.type_id}: {name}\n")
    print(f"{'Parent':<12} {'Child':<12} {'Valid':<6} {'Owner'}")
    print("-" * 50)
    for relation in shown:
        valid = "yes" if relation.valid else "no"
        print(f"{relation.parent:<12} {relation.child:<12} {valid:<6} {relation.owner}")
    return 0


def cmd_simple(graph: LexicalGraph, args: argparse.Namespace) -> int:
    """Handle simple command."""
    rendered = graph.synsets_to_simple(args.ids)
    if args.format != "text":
        _emit({"ids": args.ids, "simple": rendered}, args.format)
        return 0
    print(rendered)
    return 0


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return number


def _plain(obj: Any) -> Any:
    """Convert views and models into JSON/YAML-friendly structures."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: _plain(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, dict):
        return {k: _plain(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_plain(v) for v in obj]
    return obj


def _emit(obj: Any, fmt: str) -> None:
    data = _plain(obj)
    if fmt == "yaml":
        print(yaml.safe_dump(data, allow_unicode=True, sort_keys=False), end="")
    else:
        print(json.dumps(data, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    sys.exit(main())
