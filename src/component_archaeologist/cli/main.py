"""Component Archaeologist CLI - Main entry point.

Provides commands for mapping a React project's components, inspecting a
single component, printing its usage tree and listing refactor candidates.

Exit codes:
    0: Success
    1: Component not found
    2: Configuration error
    3: Project loading error
"""

import sys
from pathlib import Path

import click

from component_archaeologist import __version__
from component_archaeologist.analysis import rank_components
from component_archaeologist.config import get_settings
from component_archaeologist.exceptions import ConfigurationException, ProjectLoadException
from component_archaeologist.extraction.models import AnalysisResult
from component_archaeologist.extraction.react import analyze_project
from component_archaeologist.graph import lookup_component
from component_archaeologist.logging import mark_logging_configured, setup_logging

from .formatters import (
    format_component_details,
    format_json,
    format_map,
    format_not_found,
    format_radar,
    format_tree,
    radar_to_dict,
)

# Exit codes
EXIT_SUCCESS = 0
EXIT_NOT_FOUND = 1
EXIT_CONFIG_ERROR = 2
EXIT_LOAD_ERROR = 3

project_option = click.option(
    "--project",
    "-p",
    "project",
    required=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Path to the React project root",
)
verbose_option = click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")


def configure_logging(verbose: bool) -> None:
    """Configure logging for CLI.

    Args:
        verbose: Enable debug logging
    """
    settings = get_settings()
    setup_logging(
        level="DEBUG" if verbose else settings.effective_log_level,
        structured=settings.structured_logs,
        add_timestamp=verbose,
    )
    mark_logging_configured()


def run_analysis(project: Path) -> AnalysisResult:
    """Analyze a project, exiting with the matching code on fatal errors."""
    try:
        return analyze_project(project)
    except ConfigurationException as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)
    except ProjectLoadException as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_LOAD_ERROR)


@click.group()
@click.version_option(version=__version__, prog_name="compo")
def main() -> None:
    """Component Archaeologist - recover the component structure of a React codebase."""


@main.command("map")
@project_option
@click.option("--json", "as_json", is_flag=True, help="Print the full analysis as JSON")
@verbose_option
def map_command(project: Path, as_json: bool, verbose: bool) -> None:
    """Analyze a project and list detected components by role."""
    configure_logging(verbose)
    result = run_analysis(project)

    if as_json:
        click.echo(format_json(result.to_dict()))
    else:
        click.echo(format_map(result))


@main.command()
@click.argument("component_name")
@project_option
@click.option("--json", "as_json", is_flag=True, help="Print component details as JSON")
@verbose_option
def analyze(component_name: str, project: Path, as_json: bool, verbose: bool) -> None:
    """Show detailed info for a single component.

    COMPONENT_NAME: Name of the component; every component with that name is shown
    """
    configure_logging(verbose)
    result = run_analysis(project)

    matches = result.find_components(component_name)
    if not matches:
        lookup = lookup_component(result.graph, component_name, get_settings().suggestion_limit)
        click.echo(format_not_found(lookup))
        sys.exit(EXIT_NOT_FOUND)

    if as_json:
        click.echo(format_json([comp.to_dict() for comp in matches]))
        return

    if len(matches) > 1:
        click.echo(f'Found {len(matches)} components named "{component_name}". Showing all:\n')

    click.echo("\n\n".join(format_component_details(comp) for comp in matches))


@main.command()
@click.argument("component_name")
@project_option
@click.option(
    "--depth",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum depth of the children tree (default from settings)",
)
@verbose_option
def tree(component_name: str, project: Path, depth: int | None, verbose: bool) -> None:
    """Show parents and children tree for a component.

    COMPONENT_NAME: Name of the component
    """
    configure_logging(verbose)
    settings = get_settings()
    result = run_analysis(project)

    lookup = lookup_component(result.graph, component_name, settings.suggestion_limit)
    node = lookup.node
    if node is None:
        click.echo(format_not_found(lookup, " in graph"))
        sys.exit(EXIT_NOT_FOUND)

    click.echo(format_tree(result, component_name, node, depth or settings.tree_max_depth))


@main.command()
@project_option
@click.option("--all", "show_all", is_flag=True, help="Include components with no signals")
@click.option("--json", "as_json", is_flag=True, help="Print the radar as JSON")
@verbose_option
def radar(project: Path, show_all: bool, as_json: bool, verbose: bool) -> None:
    """List components that are candidates for refactoring."""
    configure_logging(verbose)
    result = run_analysis(project)

    scored = rank_components(result.components, include_clean=show_all)
    if as_json:
        click.echo(format_json(radar_to_dict(scored)))
    else:
        click.echo(format_radar(scored))


if __name__ == "__main__":
    main()
