# src/coursebook/cli/app.py
"""Command-line interface for Coursebook.

This module provides a thin Typer wrapper around the commands layer.
Each command:
1. Parses args (via Typer)
2. Calls commands module functions
3. Renders results with Rich (or plain text with --plain)
"""

from __future__ import annotations

import logging

try:
    import typer
    from rich.console import Console
    from rich.table import Table
except ImportError as e:
    raise SystemExit(
        "CLI requires additional dependencies.\nInstall with: pip install coursebook[cli]"
    ) from e

from coursebook import __version__
from coursebook.commands import chapters, classify, config_cmd, init, status, users
from coursebook.commands.base import CommandResult, ConfirmCallback, ConfirmRequest
from coursebook.commands.init import InitCancelled
from coursebook.config import load_config, load_env_file, resolve_data_dir
from coursebook.logging import configure_logging

app = typer.Typer(
    name="coursebook",
    help="Coursebook - chapters, practice answers and exams for a course site.",
    no_args_is_help=True,
)
chapters_app = typer.Typer(help="Manage chapters", no_args_is_help=True)
users_app = typer.Typer(help="Manage users and roles", no_args_is_help=True)
app.add_typer(chapters_app, name="chapters")
app.add_typer(users_app, name="users")
console = Console()

DATA_DIR_OPTION = typer.Option(
    None,
    "--data-dir",
    "-d",
    help="Data directory (default: from settings)",
)
CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="Path to config file",
)
PLAIN_OPTION = typer.Option(
    False,
    "--plain",
    help="Plain output (no colors/formatting)",
)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"coursebook {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log library activity to stderr.",
    ),
) -> None:
    """Coursebook - course content and access."""
    load_env_file()
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


def _fail(result: CommandResult, plain: bool) -> None:
    """Print the error of a failed result and exit 1."""
    if plain:
        console.print(f"Error: {result.error}", markup=False)
    else:
        console.print(f"[red]Error: {result.error}[/red]")
    raise typer.Exit(1)


def _cli_confirm(plain: bool) -> ConfirmCallback:
    def cli_confirm(request: ConfirmRequest) -> bool:
        """CLI confirmation callback using typer.confirm."""
        if request.details:
            if plain:
                console.print(request.details, markup=False)
            else:
                console.print(f"[yellow]{request.details}[/yellow]")
        return typer.confirm(request.message)

    return cli_confirm


@app.command()
def classify_cmd(
    text: str = typer.Argument(None, help="Answer text to classify"),
    kind: str = typer.Option(
        None,
        "--kind",
        "-k",
        help="Declared answer kind (text, code, image, mixed)",
    ),
    file: str = typer.Option(
        None,
        "--file",
        "-f",
        help="Read the answer text from a file",
    ),
    explain: bool = typer.Option(
        False,
        "--explain",
        help="Show the evidence behind the decision",
    ),
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Decide whether an answer is shown as code, and in which language."""
    if text is None and file is None:
        console.print("Provide TEXT or --file.")
        raise typer.Exit(2)

    result = classify.classify(text=text, kind=kind, file=file, config_path=config_file)
    if not result.success:
        _fail(result, plain)

    if plain:
        console.print(f"code\t{result.language}" if result.is_code else "text")
    elif result.is_code:
        console.print(f"[green]code[/green] ({result.language})")
    else:
        console.print("[cyan]text[/cyan]")

    if not explain:
        return

    rows = [("code patterns", ", ".join(result.categories) or "-")]
    rows += [(name, "yes" if present else "no") for name, present in result.signals.items()]
    rows.append(("declared kind", kind or "-"))
    rows.append(("score", f"{result.score:.2f} (threshold {result.threshold:.2f})"))

    if plain:
        for name, value in rows:
            console.print(f"{name}: {value}", markup=False)
        return

    table = Table(title="Evidence")
    table.add_column("Signal", style="cyan")
    table.add_column("Present")
    for name, value in rows:
        table.add_row(name, value)
    console.print(table)


classify_cmd.__name__ = "classify"


@app.command()
def status_cmd(
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Show chapter, content and user counts."""
    result = status.status(data_dir=data_dir, config_path=config_file)
    if not result.success:
        _fail(result, plain)

    effective_data_dir = resolve_data_dir(data_dir, load_config(config_file))
    rows = [
        ("Data directory", effective_data_dir),
        ("Chapters", str(result.total_chapters)),
        ("Tutorials", str(result.total_tutorials)),
        ("Practice sections", str(result.total_practice_sections)),
        ("Exams", str(result.total_exam_sections)),
        ("Users", str(result.total_users)),
        ("Admins", str(result.total_admins)),
    ]

    if plain:
        for name, value in rows:
            console.print(f"{name}: {value}", markup=False)
        return

    table = Table(title="Coursebook Status")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    for name, value in rows:
        table.add_row(name, value)
    console.print(table)


status_cmd.__name__ = "status"


@app.command()
def config_cmd_handler(
    config_file: str = CONFIG_OPTION,
) -> None:
    """Show current configuration settings."""
    result = config_cmd.config(config_path=config_file)

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    table = Table(title="Coursebook Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Source", style="dim")

    table.add_row("backend", result.backend, "yaml" if result.config_path else "default")
    if result.backend == "local":
        table.add_row("data_dir", result.data_dir, "resolved")
    table.add_row("", "", "")

    for setting in result.settings:
        table.add_row(setting.name, setting.value, setting.source)

    console.print(table)

    if result.config_path:
        console.print(f"\n[dim]Config file: {result.config_path}[/dim]")
    else:
        console.print("\n[dim]No config file found. Using env vars / defaults.[/dim]")

    console.print("\n[dim]Precedence: env var > yaml settings > profile > default[/dim]")


config_cmd_handler.__name__ = "config"


@app.command()
def init_cmd(
    backend: str = typer.Option(
        "local",
        "--backend",
        "-b",
        help="Storage backend (local or firebase)",
    ),
    data_dir: str = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Data directory for the local backend",
    ),
    profile: str = typer.Option(
        None,
        "--profile",
        "-p",
        help="Classifier profile (strict or lenient)",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing config without asking",
    ),
) -> None:
    """Initialize a new coursebook.yaml configuration file."""
    on_confirm = (lambda _request: True) if force else _cli_confirm(plain=False)

    try:
        result = init.init(
            on_confirm=on_confirm,
            backend=backend,
            data_dir=data_dir,
            profile=profile,
        )
    except InitCancelled:
        console.print("Cancelled.")
        raise typer.Exit(0) from None

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Created {result.config_path}[/green]")
    console.print()
    console.print("[bold]Ready![/bold] Try these commands:")
    console.print("  coursebook chapters seed")
    console.print("  coursebook classify 'SELECT * FROM users'")


init_cmd.__name__ = "init"


@chapters_app.command(name="list")
def chapters_list(
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """List chapters in display order."""
    result = chapters.list_chapters(data_dir=data_dir, config_path=config_file)
    if not result.success:
        _fail(result, plain)

    if not result.chapters:
        if plain:
            console.print("No chapters. Run 'coursebook chapters seed' to create the defaults.")
        else:
            console.print(
                "[dim]No chapters. Run 'coursebook chapters seed' to create the defaults.[/dim]"
            )
        return

    if plain:
        for chapter in result.chapters:
            console.print(
                f"{chapter.order}\t{chapter.id}\t{chapter.title}\t"
                f"{chapter.tutorials}/{chapter.practice_sections}/{chapter.exam_sections}",
                markup=False,
            )
        return

    table = Table(title="Chapters")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Title", style="cyan")
    table.add_column("Tutorials", justify="right")
    table.add_column("Practice", justify="right")
    table.add_column("Exams", justify="right")
    table.add_column("ID", style="dim")
    for chapter in result.chapters:
        table.add_row(
            str(chapter.order),
            chapter.title,
            str(chapter.tutorials),
            str(chapter.practice_sections),
            str(chapter.exam_sections),
            chapter.id,
        )
    console.print(table)


@chapters_app.command(name="add")
def chapters_add(
    title: str = typer.Argument(..., help="Chapter title"),
    description: str = typer.Option("", "--description", help="Chapter description"),
    order: int = typer.Option(0, "--order", "-o", help="Display position"),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Create a chapter."""
    result = chapters.add_chapter(
        title, description=description, order=order, data_dir=data_dir, config_path=config_file
    )
    if not result.success or result.chapter is None:
        _fail(result, plain)
        return

    if plain:
        console.print(f"Created {result.chapter.title} ({result.chapter.id})", markup=False)
    else:
        console.print(f"[green]Created {result.chapter.title}[/green] [dim]({result.chapter.id})[/dim]")


@chapters_app.command(name="delete")
def chapters_delete(
    chapter_id: str = typer.Argument(..., help="Chapter id"),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Skip confirmation prompt",
    ),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Delete a chapter and all of its content."""
    on_confirm = None if force else _cli_confirm(plain)

    result = chapters.delete_chapter(
        chapter_id, data_dir=data_dir, config_path=config_file, on_confirm=on_confirm
    )
    if not result.success or result.chapter is None:
        # Cancellation is not an error
        if result.error == "Cancelled.":
            console.print("Cancelled.")
            raise typer.Exit(0)
        _fail(result, plain)
        return

    if plain:
        console.print(f"Deleted {result.chapter.title}", markup=False)
    else:
        console.print(f"[green]Deleted {result.chapter.title}[/green]")


@chapters_app.command(name="seed")
def chapters_seed(
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Create the default chapters that are missing."""
    result = chapters.seed_chapters(data_dir=data_dir, config_path=config_file)
    if not result.success:
        _fail(result, plain)

    message = f"Created {len(result.created)} chapters ({result.skipped} already existed)"
    if plain:
        console.print(message)
    else:
        console.print(f"[green]{message}[/green]")


@chapters_app.command(name="cleanup")
def chapters_cleanup(
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Delete chapters whose title duplicates an earlier one."""
    result = chapters.cleanup_chapters(data_dir=data_dir, config_path=config_file)
    if not result.success:
        _fail(result, plain)

    message = f"Removed {result.deleted} duplicate chapters"
    if plain:
        console.print(message)
    else:
        console.print(f"[green]{message}[/green]")


@users_app.command(name="list")
def users_list(
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """List users in sign-up order."""
    result = users.list_users(data_dir=data_dir, config_path=config_file)
    if not result.success:
        _fail(result, plain)

    if not result.users:
        console.print("No users have signed in yet.")
        return

    if plain:
        for user in result.users:
            console.print(f"{user.uid}\t{user.email}\t{user.role}", markup=False)
        return

    table = Table(title="Users")
    table.add_column("UID", style="dim")
    table.add_column("Email", style="cyan")
    table.add_column("Name")
    table.add_column("Role", style="green")
    table.add_column("Last login", style="dim")
    for user in result.users:
        table.add_row(
            user.uid, user.email, user.display_name or "", user.role, user.last_login or ""
        )
    console.print(table)


@users_app.command(name="set-role")
def users_set_role(
    uid: str = typer.Argument(..., help="User id"),
    role: str = typer.Argument(..., help="New role (admin or user)"),
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Promote or demote a user."""
    result = users.set_role(uid, role, data_dir=data_dir, config_path=config_file)
    if not result.success:
        _fail(result, plain)

    if plain:
        console.print(f"{result.uid} is now {result.role}", markup=False)
    else:
        console.print(f"[green]{result.uid} is now {result.role}[/green]")
