"""Main CLI application for fuzzfind."""

import typer
from rich.console import Console
from rich.markup import escape

from fuzzfind import __version__
from fuzzfind.cli.context import build_search_config, configure_logging, create_display
from fuzzfind.cli.options import (
    ConfigOption,
    ExcludeOption,
    FormatOption,
    TopOption,
    VerboseOption,
    WorkersOption,
)
from fuzzfind.config import get_config, load_config
from fuzzfind.exceptions import FuzzfindError
from fuzzfind.output.prompts import RichPrompter
from fuzzfind.search import SearchSession
from fuzzfind.utils.files import resolve_base_dir

app = typer.Typer(
    name="fuzzfind",
    help="Interactive fuzzy file-name finder",
    add_completion=True,
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"fuzzfind version {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Interactive fuzzy file-name finder."""
    pass


@app.command()
def search(
    query: str = typer.Argument(..., help="Fuzzy query matched against entry names."),
    path: str = typer.Argument(".", help="Base directory to search."),
    top: TopOption = None,
    format: FormatOption = None,
    exclude: ExcludeOption = None,
    exclude_common: bool = typer.Option(
        False,
        "--exclude-common",
        help="Do not descend into VCS, cache and virtualenv directories.",
    ),
    workers: WorkersOption = None,
    follow_symlinks: bool = typer.Option(
        False,
        "--follow-symlinks",
        help="Descend into symlinked directories.",
    ),
    no_browse: bool = typer.Option(
        False,
        "--no-browse",
        help="Exit after the final view instead of showing the menu.",
    ),
    verbose: VerboseOption = False,
    config_path: ConfigOption = None,
) -> None:
    """Search a directory tree for entries matching QUERY."""
    try:
        config = load_config(config_path, required=True) if config_path else get_config()
        configure_logging(config, verbose)

        search_config = build_search_config(
            config,
            top=top,
            workers=workers,
            exclude=exclude,
            exclude_common=exclude_common,
            follow_symlinks=follow_symlinks or None,
        )
        base_dir = resolve_base_dir(path)

        session = SearchSession(
            base_dir,
            query,
            verbose=verbose,
            config=search_config,
            display=create_display(format, verbose, config),
            prompter=RichPrompter(console),
        )
        session.run(browse=not no_browse)

    except typer.Exit:
        raise
    except FuzzfindError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(e.exit_code) from None


@app.command("config")
def config_cmd(
    show_path: bool = typer.Option(
        False,
        "--path",
        "-p",
        help="Show config file path.",
    ),
    init: bool = typer.Option(
        False,
        "--init",
        help="Write the default config file if it does not exist.",
    ),
) -> None:
    """Show current configuration."""
    from fuzzfind.config.defaults import get_config_path

    config_path = get_config_path()

    if show_path:
        console.print(str(config_path))
        return

    try:
        if init:
            existed = config_path.exists()
            config = load_config(config_path, create_if_missing=True)
            if not existed:
                console.print(f"Wrote default config to {config_path}")
        else:
            config = get_config()
    except FuzzfindError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(e.exit_code) from None

    console.print("[bold]fuzzfind configuration[/bold]\n")
    console.print(f"Config file: {config_path}")
    console.print(f"Top K: {config.search.top_k}")
    console.print(f"Refresh interval: {config.search.refresh_interval}s")
    console.print(f"Workers: {config.search.max_workers or 'default'}")
    console.print(f"Follow symlinks: {config.search.follow_symlinks}")
    console.print(f"Case sensitive: {_describe_case(config.search.case_sensitive)}")
    excluded = ", ".join(config.search.exclude_dirs) or "none"
    console.print(f"Excluded directories: {escape(excluded)}")
    console.print(f"Output format: {config.output.default_format}")
    console.print(f"Log level: {config.logging.level}")


def _describe_case(case_sensitive: bool | None) -> str:
    if case_sensitive is None:
        return "smart"
    return "yes" if case_sensitive else "no"


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
