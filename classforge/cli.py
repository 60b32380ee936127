"""
Command-line interface for classforge.

Generates one class or enum per invocation:

  classforge class Foo --output-root build --namespace com.example
  classforge enum Color --constants RED GREEN --matching case_insensitive_name
"""

import argparse
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from .builders import EnumBuilder
from .core.builder import AbstractBuilder, ClassType
from .core.config import ConfigError, get_config_manager, load_config
from .core.errors import ForgeError
from .core.placement import VersionPlacement
from .core.semver import Change, SemVer
from .languages.java import (
    DeserializingMethod,
    MatchingStrategy,
    NoMatchStrategy,
    NullStrategy,
)
from .logging_config import get_logger, setup_logging
from .registry import list_supported_languages, new_builder

logger = get_logger(__name__)

# Initialize rich console
console = Console()


def _add_common_args(parser: argparse.ArgumentParser):
    parser.add_argument("name", help="Simple name of the generated type")
    parser.add_argument(
        "--output-root", "-o", help="Directory the source tree is written to"
    )
    parser.add_argument("--namespace", "-n", help="Package of the generated type")
    parser.add_argument(
        "--placement",
        choices=[p.value for p in VersionPlacement],
        help="Place the version in the package name",
    )

    version_group = parser.add_mutually_exclusive_group()
    version_group.add_argument(
        "--version", dest="semver", help="Explicit version to commit, e.g. 1.2.0"
    )
    version_group.add_argument(
        "--change",
        choices=[c.value for c in Change],
        help="Increment applied to 0.0.0 (default from config: major)",
    )

    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument(
        "--language", "-l", help=f"Output language ({', '.join(list_supported_languages())})"
    )
    parser.add_argument(
        "--show", action="store_true", help="Print the generated source"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="classforge",
        description="Generate versioned Java classes and enums",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  classforge class Foo -o build --namespace com.example --placement short
  classforge enum Color -o build --constants RED GREEN BLUE --null fallback --default RED
        """.strip(),
    )
    subparsers = parser.add_subparsers(dest="class_type", required=True)

    class_parser = subparsers.add_parser("class", help="Generate a class")
    _add_common_args(class_parser)

    enum_parser = subparsers.add_parser("enum", help="Generate an enum")
    _add_common_args(enum_parser)
    enum_parser.add_argument(
        "--constants", "-c", nargs="+", required=True, help="Enum constant names"
    )

    deserializing_group = enum_parser.add_argument_group("fromValue method")
    deserializing_group.add_argument(
        "--from-value", action="store_true", help="Generate a fromValue method"
    )
    deserializing_group.add_argument(
        "--matching", choices=[s.value for s in MatchingStrategy]
    )
    deserializing_group.add_argument(
        "--no-match", choices=[s.value for s in NoMatchStrategy]
    )
    deserializing_group.add_argument("--null", choices=[s.value for s in NullStrategy])
    deserializing_group.add_argument(
        "--default", help="Constant returned by fallback strategies"
    )
    return parser


def _build_builder(args: argparse.Namespace) -> AbstractBuilder:
    """Create and populate a builder from parsed arguments."""
    overrides = {}
    if args.output_root:
        overrides["output_root"] = args.output_root
    if args.placement:
        overrides["version_placement"] = args.placement
    if args.language:
        overrides["language"] = args.language

    config = load_config(
        args.language or "java", custom_config=overrides, config_file=args.config
    )
    for warning in get_config_manager().validate_config(config):
        console.print(f"[yellow]⚠ Warning:[/yellow] {escape(warning)}")
    if config.output_root is None:
        raise ConfigError("--output-root is required when no config provides one")

    builder = new_builder(ClassType(args.class_type), config)
    builder.set_namespace(args.namespace).set_simple_name(args.name)

    if isinstance(builder, EnumBuilder):
        builder.add_constants(*args.constants)
        if args.from_value or args.matching or args.no_match or args.null:
            method = DeserializingMethod(
                MatchingStrategy(args.matching or MatchingStrategy.EXACT_NAME.value),
                NoMatchStrategy(args.no_match or NoMatchStrategy.THROW.value),
                NullStrategy(args.null or NullStrategy.THROW.value),
            )
            builder.set_deserializing_method(method, args.default)

    return builder


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "WARNING")

    try:
        builder = _build_builder(args)
        if args.semver:
            builder.commit(SemVer.parse(args.semver))
        elif args.change:
            builder.commit(Change(args.change))
        else:
            builder.commit()
    except ForgeError as e:
        logger.debug("Generation failed", exc_info=True)
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1

    artifact = builder.committed_artifacts[-1]
    console.print(
        f"[green]✓[/green] Generated [bold]{artifact.fully_qualified_name}[/bold] "
        f"({artifact.semver}) → {artifact.path}"
    )
    if args.show:
        console.print(Syntax(artifact.content, builder.generator.language_name))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
