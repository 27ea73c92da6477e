"""Command line interface: list, search and run tools, or serve the API."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from dataclasses import asdict
from typing import TextIO

import uvicorn
from pydantic import ValidationError

from txtx import __version__
from txtx.registry.catalog import build_default_registry
from txtx.registry.registry import ToolRegistry
from txtx.search.index import ToolSearchIndex

PROGRAM_NAME = "txtx"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME, description="Text transformations from the command line"
    )
    parser.add_argument("--version", action="version", version=f"{PROGRAM_NAME} {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_cmd = subparsers.add_parser("list", help="List available tools")
    list_cmd.add_argument("--category", help="Only list tools in this category slug")

    search_cmd = subparsers.add_parser("search", help="Search tools and categories")
    search_cmd.add_argument("query", nargs="+")
    search_cmd.add_argument("--limit", type=int, default=10)
    search_cmd.add_argument("--type", dest="item_type", choices=["tool", "category", "all"],
                            default="all")
    search_cmd.add_argument("--category")
    search_cmd.add_argument("--json", action="store_true", help="Emit JSON results")

    run_cmd = subparsers.add_parser("run", help="Run a tool on text (or stdin)")
    run_cmd.add_argument("tool", help="Tool slug, e.g. base64-encode")
    run_cmd.add_argument("text", nargs="*")
    run_cmd.add_argument("-o", "--option", action="append", default=[], metavar="KEY=VALUE",
                         help="Tool option, may be repeated")

    serve_cmd = subparsers.add_parser("serve", help="Run the HTTP API server")
    serve_cmd.add_argument("--host", default="127.0.0.1")
    serve_cmd.add_argument("--port", type=int, default=8000)
    return parser


def _list_tools(registry: ToolRegistry, category_slug: str | None, out: TextIO) -> int:
    categories = registry.all_categories()
    if category_slug:
        found = registry.get_category_by_slug(category_slug)
        if found is None:
            print(f"Error: Unknown category '{category_slug}'", file=sys.stderr)
            return 1
        categories = [found]

    for category in categories:
        print(f"{category.name}:", file=out)
        for spec in sorted(registry.tools_in_category(category.id), key=lambda s: s.slug):
            print(f"  {spec.slug} - {spec.description}", file=out)
        print("", file=out)
    return 0


def _search(registry: ToolRegistry, args: argparse.Namespace, out: TextIO) -> int:
    index = ToolSearchIndex(registry)
    results = index.search(
        " ".join(args.query),
        limit=args.limit,
        category=args.category,
        item_type=args.item_type,
    )
    if args.json:
        print(json.dumps([asdict(result) for result in results], indent=2), file=out)
        return 0
    if not results:
        print("No results", file=out)
        return 0
    for result in results:
        print(f"{result.score:>4}  {result.type:<8}  {result.slug}  {result.name}", file=out)
    return 0


def _parse_options(pairs: Sequence[str]) -> dict[str, str]:
    options: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Invalid option '{pair}', expected KEY=VALUE")
        options[key] = value
    return options


def _run(registry: ToolRegistry, args: argparse.Namespace, stdin: TextIO, out: TextIO) -> int:
    spec = registry.get_tool_by_slug(args.tool)
    if spec is None:
        print(f"Error: Unknown tool '{args.tool}'", file=sys.stderr)
        print(f"Run '{PROGRAM_NAME} list' to see available tools", file=sys.stderr)
        return 1

    try:
        payload: dict[str, object] = dict(_parse_options(args.option))
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not spec.is_generator:
        text = " ".join(args.text)
        if not text and not stdin.isatty():
            text = stdin.read().rstrip("\n")
        if not text:
            print("Error: No input provided", file=sys.stderr)
            print(f"Usage: {PROGRAM_NAME} run {spec.slug} \"your text here\"", file=sys.stderr)
            return 1
        payload["input"] = text

    try:
        print(registry.execute(spec.id, payload), file=out)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "input"
        print(f"Error: {field}: {first['msg']}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    args = build_parser().parse_args(list(argv) if argv is not None else None)
    out = stdout or sys.stdout

    if args.command == "serve":
        uvicorn.run("txtx.api.main:create_app", factory=True, host=args.host, port=args.port)
        return 0

    registry = build_default_registry()
    if args.command == "list":
        return _list_tools(registry, args.category, out)
    if args.command == "search":
        return _search(registry, args, out)
    if args.command == "run":
        return _run(registry, args, stdin or sys.stdin, out)
    return 1
