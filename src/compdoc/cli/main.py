# Copyright 2026 CompDoc Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the compdoc command-line interface."""

import argparse
import sys
from pathlib import Path

from yachalk import chalk

from compdoc.generator.build import (
    GenerationError,
    find_component_files,
    generate_component_docs,
    generate_token_data,
    process_component_file,
)
from compdoc.logging import configure_logging
from compdoc.tokens.catalog import build_token_catalog
from compdoc.validation.checks import validate_component_api
from compdoc.workspace.config import (
    CONFIG_FILENAME,
    WorkspaceConfig,
    WorkspaceConfigError,
    load_workspace_config,
    render_default_config,
)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the compdoc CLI."""
    parser = argparse.ArgumentParser(
        prog="compdoc",
        description="compdoc: component API documentation and design-token generator",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Write a default configuration file",
        description=f"Create a default {CONFIG_FILENAME} in a project directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Project directory (default: current directory)",
    )

    # docs subcommand
    docs_parser = subparsers.add_parser(
        "docs",
        help="Generate component documentation",
        description="Extract the API of every component and write the documentation JSON.",
    )
    _add_common_arguments(docs_parser)
    docs_parser.add_argument("-i", "--input", help="Components directory (default: from config)")
    docs_parser.add_argument("-o", "--output", help="Output directory (default: from config)")
    docs_parser.add_argument("-f", "--filename", help="Name of the output file (default: from config)")
    docs_parser.add_argument("--markdown", action="store_true", help="Also write a Markdown page per component")
    docs_parser.add_argument("--typedefs", action="store_true", help="Also write a .d.ts snippet per component")
    docs_parser.add_argument("--strict", action="store_true", help="Abort on the first unreadable component file")
    docs_parser.add_argument(
        "--with-tokens",
        action="store_true",
        help="Resolve design tokens first and fill in the values of referenced tokens",
    )

    # tokens subcommand
    tokens_parser = subparsers.add_parser(
        "tokens",
        help="Generate design-token data",
        description="Resolve the theme variable tables and write the token JSON document.",
    )
    _add_common_arguments(tokens_parser)
    tokens_parser.add_argument("-o", "--output", help="Output file (default: from config)")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check component documentation for completeness",
        description="Extract and validate every component; fails if any component is incomplete.",
    )
    _add_common_arguments(check_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Project directory (default: current directory)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output")


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    configure_logging(verbose=getattr(args, "verbose", False))
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "docs":
        return _cmd_docs(args)
    if args.command == "tokens":
        return _cmd_tokens(args)
    if args.command == "check":
        return _cmd_check(args)
    return 0


def _load_project(args: argparse.Namespace) -> tuple[Path, WorkspaceConfig] | None:
    """Resolve the project directory and load its configuration, printing errors."""
    directory = Path(args.directory).resolve()
    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return None
    try:
        config = load_workspace_config(directory / CONFIG_FILENAME)
    except WorkspaceConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None
    return directory, config


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILENAME
    if config_file.exists():
        print(f"Error: configuration already exists at '{config_file}'.", file=sys.stderr)
        return 1

    config_file.write_text("# compdoc configuration\n" + render_default_config(), encoding="utf-8")
    print(f"Initialized compdoc configuration at '{config_file}'.")
    return 0


def _cmd_docs(args: argparse.Namespace) -> int:
    """Handle the docs subcommand."""
    project = _load_project(args)
    if project is None:
        return 1
    directory, config = project

    components_dir = Path(args.input).resolve() if args.input else directory / config.components_directory
    output_dir = Path(args.output).resolve() if args.output else directory / config.output_directory

    print(f"Generating component documentation from '{components_dir}'...")
    try:
        catalog = None
        if args.with_tokens:
            document = generate_token_data(
                directory / config.styles_directory,
                themes=config.themes,
                token_files=config.token_files,
            )
            catalog = build_token_catalog(document)
        report = generate_component_docs(
            components_dir,
            output_dir,
            filename=args.filename or config.docs_filename,
            extensions=config.file_extensions,
            prefix=config.component_prefix,
            catalog=catalog,
            strict=args.strict or config.strict,
            markdown_dir=output_dir / "markdown" if args.markdown else None,
            typedefs_dir=output_dir / "types" if args.typedefs else None,
        )
    except GenerationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for path, message in report.failures.items():
        print(f"Warning: skipped '{path}': {message}")
    for path in report.invalid_components:
        print(f"Warning: component '{path}' has incomplete documentation")
    print(f"Documented {len(report.components)} component(s) into '{output_dir}'.")
    return 0


def _cmd_tokens(args: argparse.Namespace) -> int:
    """Handle the tokens subcommand."""
    project = _load_project(args)
    if project is None:
        return 1
    directory, config = project

    output_path = (
        Path(args.output).resolve() if args.output else directory / config.output_directory / config.tokens_filename
    )
    try:
        document = generate_token_data(
            directory / config.styles_directory,
            output_path,
            themes=config.themes,
            token_files=config.token_files,
        )
    except GenerationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Wrote {len(document.records())} variable(s) to '{output_path}'.")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    project = _load_project(args)
    if project is None:
        return 1
    directory, config = project

    try:
        files = find_component_files(directory / config.components_directory, config.file_extensions)
    except GenerationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    if not files:
        print("No component files found.")
        return 0

    print(f"Checking {len(files)} component file(s)...")
    all_valid = True
    for path in files:
        try:
            api = process_component_file(path, prefix=config.component_prefix)
        except GenerationError as exc:
            print(chalk.red(f"  FAIL  {path.name}"))
            print(f"Error: {exc}", file=sys.stderr)
            all_valid = False
            continue
        if api is None:
            continue
        result = validate_component_api(api)
        if result.is_valid:
            print(chalk.green(f"  PASS  {api.prefixed_name}"))
            continue
        all_valid = False
        print(chalk.red(f"  FAIL  {api.prefixed_name}"))
        for error in result.errors:
            print(f"        {error}")

    if not all_valid:
        return 1

    print("No issues found.")
    return 0
