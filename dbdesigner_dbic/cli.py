"""
Command-line interface for schema generation.

    dbdesigner-dbic model.xml --namespace MyApp::DB --output lib
"""

from __future__ import annotations

import argparse
import sys
from typing import Any

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from .codegen import (
    ConfigError,
    GeneratorError,
    RegistryError,
    WriteError,
    generate_from_file,
    get_target_info,
    list_supported_targets,
    load_config,
)
from .codegen.core.config import LAYOUTS
from .codegen.core.writer import FileWriter
from .logging_config import get_logger, setup_logging
from .reader import ReaderError

logger = get_logger(__name__)

# Errors reported to the user without a traceback
HANDLED_ERRORS = (ConfigError, ReaderError, GeneratorError, WriteError, RegistryError)

console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="dbdesigner-dbic",
        description="Create a DBIx::Class schema from a DBDesigner4 XML model",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dbdesigner-dbic model.xml --namespace MyApp::DB --output lib
  dbdesigner-dbic --url https://example.com/model.xml --dry-run
  dbdesigner-dbic model.xml --layout namespaces -o lib
  dbdesigner-dbic --list-targets
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="DBDesigner4 XML file")
    input_group.add_argument("--url", help="URL to fetch the XML model from")

    parser.add_argument(
        "--namespace", "-n", help="Namespace of the generated packages (e.g. MyApp::DB)"
    )
    parser.add_argument(
        "--output", "-o", dest="output_path", help="Output directory (default: .)"
    )
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument(
        "--target", "-t", default="dbic", help="Target ORM (default: dbic)"
    )
    parser.add_argument(
        "--layout",
        choices=LAYOUTS,
        help="Class layout: explicit load_classes or Result:: namespaces",
    )
    parser.add_argument(
        "--comments",
        action="store_true",
        default=None,
        help="Add a header comment to generated files",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the generated modules instead of writing them",
    )

    # Diagnostics
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Show generation details"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: WARNING)",
    )

    parser.add_argument(
        "--list-targets",
        action="store_true",
        help="List supported targets and exit",
    )

    return parser


def _build_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Collect configuration values given on the command line."""
    return {
        "namespace": args.namespace,
        "output_path": args.output_path,
        "layout": args.layout,
        "add_comments": args.comments,
        "input_file": args.file,
    }


def _list_targets() -> int:
    """List supported targets."""
    table = Table(title="📋 Supported Targets", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Target", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for target in list_supported_targets():
        info = get_target_info(target)
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {target}", info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    return 0


def _show_result(result, dry_run: bool, verbose: bool) -> None:
    """Print warnings, metadata and (for dry runs) the generated sources."""
    for warning in result.warnings:
        console.print(f"[yellow]⚠️  {warning}[/yellow]")

    if verbose:
        details = "\n".join(
            f"[bold]{key}:[/bold] {value}" for key, value in result.metadata.items()
        )
        console.print(Panel(details, title="📊 Generation Details", border_style="blue"))

    if dry_run:
        for module, source in result.files.items():
            console.print()
            console.print(
                Panel(
                    Syntax(source, "perl", theme="monokai", line_numbers=False),
                    title=f"📄 {module}",
                    border_style="green",
                )
            )


def run(args: argparse.Namespace) -> int:
    """
    Run the generator for parsed arguments.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    if args.list_targets:
        return _list_targets()

    config = load_config(custom_config=_build_overrides(args), config_file=args.config)

    if not (config.input_file or args.url):
        console.print("[red]✗[/red] Input source required (file or --url)")
        return 1

    result = generate_from_file(target=args.target, config=config, url=args.url)
    if not result.success:
        console.print(f"[red]✗ {result.error_message}[/red]")
        return 1

    _show_result(result, args.dry_run, args.verbose)

    if args.dry_run:
        return 0

    writer = FileWriter(config.output_path, config.file_extension)
    paths = writer.write_files(result.files)

    console.print(
        f"[green]✓[/green] Wrote {len(paths)} files for "
        f"[bold]{result.metadata['schema_module']}[/bold]"
    )
    if args.verbose:
        for path in paths:
            console.print(f"  [dim]{path}[/dim]")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point of the ``dbdesigner-dbic`` command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging("INFO" if args.verbose and args.log_level == "WARNING" else args.log_level)

    try:
        return run(args)
    except HANDLED_ERRORS as e:
        logger.debug("Run failed", exc_info=True)
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
