"""CLI entrypoint: resolve static members of a class named on the command line."""

from __future__ import annotations

import argparse
import inspect
import json
import logging
import sys
from pathlib import Path
from typing import Any

from elresolver import __version__
from elresolver.config import load_config
from elresolver.constants.branding import CLI_DESCRIPTION
from elresolver.constants.messages import LOCALE_PATTERN
from elresolver.context import EvaluationContext
from elresolver.exceptions import ConfigError, ElError
from elresolver.model import ClassHandle, Resolution, qualified_name
from elresolver.resolvers import CompositeResolver, StaticFieldResolver


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="elresolver",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-r", "--root", type=Path, default=Path("."), help="Directory holding elresolver.yaml")
    common.add_argument("-c", "--config", type=Path, help="Explicit config file")
    common.add_argument("-l", "--locale", default=None, help="Locale for error messages (overrides config)")
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    get = subparsers.add_parser("get", parents=[common], help="Read a public static field")
    get.add_argument("class_name", help="Class name, e.g. decimal.Decimal or pkg.mod:Outer.Inner")
    get.add_argument("name", help="Static field name")

    get_type = subparsers.add_parser("type", parents=[common], help="Show the declared type of a static field")
    get_type.add_argument("class_name", help="Class name")
    get_type.add_argument("name", help="Static field name")

    invoke = subparsers.add_parser("invoke", parents=[common], help="Call a static method or '<init>'")
    invoke.add_argument("class_name", help="Class name")
    invoke.add_argument("name", help="Static method name, or <init> for the constructor")
    invoke.add_argument("args", nargs="*", help="Arguments as JSON literals; other text is passed as a string")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )

    try:
        config = load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    locale = args.locale or config.locale
    if not LOCALE_PATTERN.match(locale):
        print(f"Configuration error: invalid locale {locale!r}", file=sys.stderr)
        return 2

    context = EvaluationContext(locale=locale, catalog=config.catalog())
    resolver = CompositeResolver([StaticFieldResolver.from_config(config)])

    try:
        handle = ClassHandle.from_name(args.class_name)
        resolution = _dispatch(args, resolver, context, handle)
    except ElError as exc:
        print(f"Resolution error: {exc}", file=sys.stderr)
        return 1

    print(_render(resolution.value))
    return 0


def _dispatch(
    args: argparse.Namespace,
    resolver: CompositeResolver,
    context: EvaluationContext,
    handle: ClassHandle,
) -> Resolution:
    if args.command == "get":
        return resolver.get_value(context, handle, args.name)
    if args.command == "type":
        return resolver.get_type(context, handle, args.name)
    params = [_parse_argument(raw) for raw in args.args]
    return resolver.invoke(context, handle, args.name, None, params)


def _parse_argument(raw: str) -> Any:
    """Decode a JSON literal, falling back to the raw string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _render(value: Any) -> str:
    if inspect.isclass(value):
        return qualified_name(value)
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)
