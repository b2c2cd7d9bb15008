"""
Command-line interface for model generation.

Provides the ``modelgen`` command with ``generate`` and ``languages``
subcommands.
"""

from __future__ import annotations

import argparse
import logging
from typing import Any

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from .codegen import (
    BatchResult,
    ConsoleEmitter,
    EntityDescriptor,
    FileEmitter,
    GeneratorError,
    get_generator,
    get_language_info,
    list_all_language_info,
    load_config,
    run_batch,
)
from .codegen.registry import get_registry
from .logging_config import configure_logging, get_logger
from .utils import load_manifest

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Generated code and listings go to stdout; status goes to stderr
console = Console()
err_console = Console(stderr=True)


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``modelgen`` command."""
    parser = argparse.ArgumentParser(
        prog="modelgen",
        description="Generate data-mapping classes with typed accessors from database tables",
    )
    subparsers = parser.add_subparsers(dest="command")

    generate = subparsers.add_parser(
        "generate",
        help="Generate units for source entities",
        description="Generate one unit per source entity from its table's columns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  modelgen generate com.acme.User --connection db.json
  modelgen generate com.acme.User --table app_users -c db.json -o src/main/java
  modelgen generate --manifest entities.json --language python -o models
        """.strip(),
    )
    generate.add_argument(
        "entities",
        nargs="*",
        metavar="ENTITY",
        help="Qualified entity name (e.g. com.acme.User)",
    )
    generate.add_argument(
        "--connection", "-c", metavar="FILE", help="Connection config file (JSON)"
    )
    generate.add_argument(
        "--table",
        "-t",
        help="Table name, when it differs from the entity name (single entity only)",
    )
    generate.add_argument(
        "--language", "-l", help="Target language (default: java)"
    )
    generate.add_argument(
        "--output-dir",
        "-o",
        metavar="DIR",
        help="Root of the generated source tree (default: print to stdout)",
    )
    generate.add_argument("--prefix", help="Prefix for generated unit names")
    generate.add_argument(
        "--base-type", metavar="NAME", help="Qualified name of the base entity"
    )
    generate.add_argument("--config", metavar="FILE", help="Generator config file (JSON)")
    generate.add_argument(
        "--manifest", "-m", metavar="FILE", help="Manifest listing entities (JSON)"
    )
    generate.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first entity that fails",
    )
    generate.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't add comments to generated code",
    )
    generate.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log progress and show stage reports",
    )
    generate.set_defaults(func=_handle_generate)

    languages = subparsers.add_parser(
        "languages",
        help="List supported target languages",
        description="List supported target languages, or describe one",
    )
    languages.add_argument(
        "language", nargs="?", help="Show details about this language"
    )
    languages.set_defaults(func=_handle_languages)

    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Run the command line.

    Args:
        argv: Arguments without the program name; defaults to ``sys.argv[1:]``

    Returns:
        Exit code (0 for success, 1 for failure, 2 for usage errors)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "func", None):
        parser.print_help()
        return 2

    configure_logging(logging.INFO if getattr(args, "verbose", False) else logging.WARNING)

    try:
        return args.func(args)
    except (CLIError, GeneratorError) as e:
        err_console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        logger.debug("Command failed", exc_info=True)
        return 1


def _handle_generate(args: argparse.Namespace) -> int:
    """Handle the generate subcommand."""
    entities, manifest_connection = _collect_entities(args)
    if not entities:
        raise CLIError("No entities given (pass ENTITY or --manifest)")

    overrides = _build_overrides(args, manifest_connection)
    language = _resolve_language(args.language) if args.language else None
    config = load_config(language, custom_config=overrides, config_file=args.config)

    # A language taken from the config file may be an alias
    primary = _resolve_language(config.language)
    if primary != config.language:
        config = load_config(primary, custom_config=overrides, config_file=args.config)

    generator = get_generator(primary, config)

    if config.output_dir:
        emitter = FileEmitter(config.output_dir, generator.file_extension)
    else:
        emitter = ConsoleEmitter(generator.language_name, console=console)

    logger.info(
        "Generating %d %s unit(s) into %s",
        len(entities),
        generator.language_name,
        config.output_dir or "stdout",
    )

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=err_console,
        transient=True,
        disable=not config.output_dir,
    ) as progress:
        task = progress.add_task(
            f"[green]Generating {generator.language_name} code...", total=None
        )
        batch = run_batch(entities, generator, emitter, config, fail_fast=args.fail_fast)
        progress.remove_task(task)

    _print_summary(batch, verbose=args.verbose)
    return 0 if batch.success else 1


def _collect_entities(
    args: argparse.Namespace,
) -> tuple[list[EntityDescriptor], str | None]:
    """Entities from the manifest, then from the command line."""
    entities: list[EntityDescriptor] = []
    manifest_connection = None

    if args.manifest:
        entities, manifest_connection = load_manifest(args.manifest)

    if args.table and len(args.entities) != 1:
        raise CLIError("--table needs exactly one ENTITY")

    for name in args.entities:
        entities.append(EntityDescriptor(name, table=args.table))

    return entities, manifest_connection


def _resolve_language(language: str) -> str:
    registry = get_registry()
    if not registry.is_supported(language):
        supported = ", ".join(registry.list_languages())
        raise CLIError(f"Unsupported language '{language}' (supported: {supported})")
    return registry.resolve(language)


def _build_overrides(
    args: argparse.Namespace, manifest_connection: str | None
) -> dict[str, Any]:
    """Build configuration overrides from CLI arguments."""
    overrides: dict[str, Any] = {}

    connection = args.connection or manifest_connection
    if connection:
        overrides["connection_config"] = connection

    if args.output_dir:
        overrides["output_dir"] = args.output_dir

    if args.prefix is not None:
        overrides["class_prefix"] = args.prefix

    if args.base_type:
        overrides["base_type"] = args.base_type

    if args.no_comments:
        overrides["add_comments"] = False

    if args.fail_fast:
        overrides["fail_fast"] = True

    return overrides


def _print_summary(batch: BatchResult, verbose: bool = False) -> None:
    """Print per-entity outcomes, warnings and, if verbose, stage reports."""
    err_console.print()
    for result in batch.results:
        entity = result.metadata.get("entity") or _failed_entity(result)
        if result.success:
            target = result.output_path or result.metadata.get("unit", "")
            err_console.print(f"[green]✓[/green] {entity} → [cyan]{target}[/cyan]")
        else:
            err_console.print(f"[red]✗[/red] {entity}: {escape(result.error_message)}")
            if result.generated:
                err_console.print(
                    "  [yellow]Code was generated but could not be written[/yellow]"
                )

        for warning in result.warnings:
            err_console.print(f"  [yellow]•[/yellow] {escape(warning)}")

    if batch.aborted:
        err_console.print("[yellow]⚠️  Stopped after the first failure[/yellow]")

    err_console.print(
        f"\n📊 {len(batch.succeeded)} succeeded, {len(batch.failed)} failed"
    )

    if verbose:
        _print_reports(batch)


def _failed_entity(result) -> str:
    if result.reports:
        return result.reports[-1].entity
    return "?"


def _print_reports(batch: BatchResult) -> None:
    table = Table(
        title="📋 Stage Reports",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Entity", style="bold")
    table.add_column("Stage")
    table.add_column("Outcome")
    table.add_column("Detail", style="dim")

    for report in batch.reports:
        outcome = report.outcome.value
        style = "green" if outcome == "ok" else "red"
        table.add_row(
            report.entity,
            report.stage.value,
            f"[{style}]{outcome}[/{style}]",
            escape(report.detail),
        )

    err_console.print()
    err_console.print(table)


def _handle_languages(args: argparse.Namespace) -> int:
    """Handle the languages subcommand."""
    if args.language:
        return _show_language_info(args.language)
    return _list_languages()


def _list_languages() -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Base Type")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(lang_name, info["file_extension"], info["base_type"], aliases)

    console.print()
    console.print(table)
    console.print()
    console.print(
        Panel(
            "[bold]Usage:[/bold] modelgen generate [dim]com.acme.User[/dim] "
            "--connection [dim]db.json[/dim] --language [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def _show_language_info(language: str) -> int:
    """Show detailed information about a specific language."""
    info = get_language_info(_resolve_language(language))
    generator = get_generator(info["name"])

    info_text = (
        f"[bold]Language:[/bold] {info['name']}\n"
        f"[bold]File Extension:[/bold] {info['file_extension']}\n"
        f"[bold]Generator Class:[/bold] {info['class']}\n"
        f"[bold]Module:[/bold] {info['module']}"
    )
    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print()
    console.print(
        Panel(info_text, title=f"🔧 {info['name'].title()} Generator", border_style="green")
    )

    config_table = Table(
        title="⚙️  Default Configuration",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    config_table.add_column("Setting", style="bold")
    config_table.add_column("Value", style="green")
    config_table.add_row("Class Prefix", generator.config.class_prefix)
    config_table.add_row("Base Type", generator.config.base_type)
    config_table.add_row("Read Operation", generator.config.read_operation)
    config_table.add_row("Write Operation", generator.config.write_operation)
    config_table.add_row("Indent Size", str(generator.config.indent_size))
    config_table.add_row("Add Comments", str(generator.config.add_comments))

    console.print()
    console.print(config_table)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
