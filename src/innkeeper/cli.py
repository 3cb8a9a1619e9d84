"""
Command Line Interface for innkeeper
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .config import HotelConfig
from .formatter import HotelFormatter
from .menu import HotelMenu
from .session import HotelSession
from .exceptions import InnkeeperError, StorageError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True)]
)
logger = logging.getLogger("innkeeper")

app = typer.Typer(
    name="innkeeper",
    help="Hotel booking manager with a loyalty program",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        from . import __version__
        console.print(f"innkeeper version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Directory holding customers.txt, rooms.txt and bookings.txt (default: $INNKEEPER_DATA_DIR or .)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output"
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information"
    ),
) -> None:
    """
    Hotel booking manager with a loyalty program
    """
    if verbose:
        logger.setLevel(logging.DEBUG)
        logger.debug("Verbose mode enabled")

    ctx.obj = HotelConfig.from_env(data_dir)


@contextmanager
def _open_session(config: HotelConfig, write_back: bool = True) -> Iterator[HotelSession]:
    """
    Open a session for one command, turning innkeeper errors into exit code 1
    """
    try:
        session = HotelSession.open(config)
        yield session
        if write_back:
            session.close()
    except StorageError as e:
        logger.error(f"Storage error: {e}")
        raise typer.Exit(code=1)
    except InnkeeperError as e:
        logger.error(f"innkeeper error: {e}")
        raise typer.Exit(code=1)


@app.command()
def run(ctx: typer.Context) -> None:
    """Start the interactive menu."""
    with _open_session(ctx.obj) as session:
        HotelMenu(session, console).run()


@app.command()
def rooms(ctx: typer.Context) -> None:
    """List available rooms by floor."""
    with _open_session(ctx.obj, write_back=False) as session:
        formatter = HotelFormatter(console)
        console.print(formatter.format_available_rooms(session.engine))


@app.command()
def report(ctx: typer.Context) -> None:
    """Print the occupancy and popular room types reports."""
    with _open_session(ctx.obj, write_back=False) as session:
        formatter = HotelFormatter(console)
        console.print(formatter.format_occupancy(session.occupancy()))
        console.print(formatter.format_popularity(session.popular_room_types()))


@app.command()
def checkout(
    ctx: typer.Context,
    room_number: int = typer.Argument(..., help="Room to release, e.g. 101"),
    admin_username: str = typer.Option(..., "--admin-username", prompt="Admin username"),
    admin_password: str = typer.Option(..., "--admin-password", prompt="Admin password", hide_input=True),
) -> None:
    """Release a booked room (admin only)."""
    config: HotelConfig = ctx.obj
    if admin_username != config.admin_username or admin_password != config.admin_password:
        console.print("[red]Incorrect admin credentials. Access denied.[/red]")
        raise typer.Exit(code=1)

    with _open_session(config) as session:
        receipt = session.checkout(room_number)
        holder = f" (held by '{escape(receipt.username)}')" if receipt.username else ""
        console.print(f"[green]Room {receipt.room_number}{holder} is now available.[/green]")


if __name__ == "__main__":
    app()
