"""
Command-line interface for SEO Configurator.

Provides commands to set up, build, apply and inspect a project's SEO
configuration.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .config_store import ConfigStoreError, load_config
from .configurator import ApplyResult, SEOConfigurator, apply_config
from .models import SEOConfig
from .questionnaire import AnswersFileError, gather_answers, load_answers_file
from .validation import AnswerValidationError

console = Console()

PROJECT_ARGUMENT = click.argument(
    "project",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
)


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output.",
)
def main(verbose: bool) -> None:
    """
    SEO Configurator - Set up SEO meta tags for a web project.

    Examples:

        seo-setup setup ./my-site

        seo-setup build ./my-site --answers answers.json
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@PROJECT_ARGUMENT
@click.option("--redo", is_flag=True, default=False, help="Ignore the stored config and run setup again.")
@click.option("--defaults", is_flag=True, default=False, help="Skip interactive setup when no config exists.")
def setup(project: Path, redo: bool, defaults: bool) -> None:
    """Run SEO setup for PROJECT and apply the result."""
    console.print(Panel.fit(
        "[bold blue]SEO Configuration Setup[/bold blue]\n"
        "Let's set up comprehensive SEO for your website.",
        border_style="blue",
    ))

    configurator = SEOConfigurator()
    try:
        existing = configurator.load_reusable(project)
        if existing is None and (defaults or not click.confirm(
            "No SEO configuration found. Run interactive setup?", default=True
        )):
            console.print("[yellow]Using default SEO configuration[/yellow]")
            config = configurator.default(project)
        else:
            config = configurator.interactive_configure(
                project,
                collect=gather_answers,
                confirm_reuse=(lambda: False) if redo else (
                    lambda: click.confirm("Found existing SEO configuration. Use it?", default=True)
                ),
            )
        result = apply_config(project, config)
    except AnswerValidationError as e:
        _fail(e)

    _display_summary(config, result)


@main.command()
@PROJECT_ARGUMENT
@click.option(
    "--answers",
    "-a",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    help="JSON file with setup answers (camelCase keys).",
)
def build(project: Path, answers: Path) -> None:
    """Build and save the SEO config of PROJECT from an answers file, then apply it."""
    try:
        answer_record = load_answers_file(answers)
        config = SEOConfigurator().build_and_save(project, answer_record)
        result = apply_config(project, config)
    except (AnswersFileError, AnswerValidationError) as e:
        _fail(e)

    _display_summary(config, result)


@main.command()
@PROJECT_ARGUMENT
@click.option(
    "--placeholder",
    is_flag=True,
    default=False,
    help="Inject generic placeholder tags instead of configured values.",
)
def apply(project: Path, placeholder: bool) -> None:
    """Apply the stored (or default) SEO config of PROJECT to its files."""
    config: Optional[SEOConfig] = None
    try:
        if not placeholder:
            config = SEOConfigurator().configure(project)
        result = apply_config(project, config)
    except ConfigStoreError as e:
        _fail(e)

    _display_summary(config, result)


@main.command()
@PROJECT_ARGUMENT
def show(project: Path) -> None:
    """Print the stored SEO config of PROJECT."""
    try:
        config = load_config(project)
    except ConfigStoreError as e:
        _fail(e)

    if config is None:
        console.print("[yellow]No SEO configuration found.[/yellow]")
        return

    table = Table(title="SEO Configuration", show_header=True)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    for key, value in config.to_dict().items():
        if isinstance(value, list):
            value = ", ".join(value)
        elif isinstance(value, dict):
            value = ", ".join(f"{k}={v}" for k, v in value.items())
        table.add_row(key, str(value))

    console.print(table)


def _fail(error: Exception) -> None:
    console.print(f"[red]Error:[/red] {error}")
    sys.exit(1)


def _display_summary(config: Optional[SEOConfig], result: ApplyResult) -> None:
    """Display which files were written."""
    table = Table(title="SEO Files", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Status", style="yellow")

    if result.index_html:
        table.add_row(str(result.index_html), "Meta tags added")
    else:
        table.add_row("index.html", "Unchanged")
    table.add_row(str(result.robots_txt), "Written")
    table.add_row(str(result.meta_tags_util), "Written")

    console.print(table)

    if config is not None:
        schema_type = config.structured_data.type if config.structured_data else "Organization"
        console.print(f"\n[cyan]Site:[/cyan] {config.site_name} ({config.site_url})")
        console.print(f"[cyan]Structured data type:[/cyan] {schema_type}")

    console.print("\n[bold green]Success![/bold green] SEO setup complete.")


def run_cli() -> None:
    """Entry point for the CLI."""
    main()


if __name__ == "__main__":
    run_cli()
