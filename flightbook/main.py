"""
Command line entry point for flightbook.

Running ``flightbook`` without a command runs the booking demo: create the
tables, upsert flight ABC123, book seat 3 on flight 1 and print the status
of seat 1. Any failing step is fatal and exits with status 1.

``flightbook serve`` starts the template server.
"""

import logging
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from flightbook.database import DatabaseConfig, create_flights_table, create_seats_table
from flightbook.models import SeatStatusModel
from flightbook.services import upsert_flight, book_seat, check_seat_status
from flightbook.utils.config import load_config
from flightbook.utils.log import setup_logging

logger = logging.getLogger(__name__)

# Initialize typer app and rich consoles
app = typer.Typer(help="Flight seat booking demo", add_completion=False)
console = Console()
err_console = Console(stderr=True)

DEMO_FLIGHT_NO = "ABC123"
DEMO_DEPARTURE = "New York"
DEMO_DESTINATION = "Los Angeles"
DEMO_FLIGHT_ID = 1
DEMO_BOOKED_SEAT = 3
DEMO_CHECKED_SEAT = 1


def fatal(step: str, error: Exception) -> NoReturn:
    """Report a failed step and stop the program."""
    logger.critical(f"{step} failed: {error}")
    err_console.print(f"[red]❌ {escape(step)}: {escape(str(error))}[/red]")
    raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main_callback(ctx: typer.Context):
    """Run the booking demo when no command is given."""
    try:
        config = load_config()
    except ValueError as e:
        err_console.print(f"[red]❌ {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    setup_logging(config.log_level)
    ctx.obj = config

    if ctx.invoked_subcommand is None:
        ctx.invoke(demo, ctx=ctx)


@app.command()
def demo(ctx: typer.Context):
    """Run the fixed booking demo sequence against the configured store."""
    config = ctx.obj
    db_config = DatabaseConfig(database_url=config.database_url, echo=config.database_echo)

    try:
        # Open or create the database file
        try:
            db_config.initialize()
        except Exception as e:
            fatal("Opening database", e)

        # Ensure that flights and seats tables exist
        try:
            create_flights_table(db_config.engine)
            create_seats_table(db_config.engine)
        except Exception as e:
            fatal("Creating tables", e)

        with db_config.get_session_context() as session:
            try:
                upsert_flight(session, DEMO_FLIGHT_NO, DEMO_DEPARTURE, DEMO_DESTINATION)
            except Exception as e:
                fatal("Creating flight", e)

            try:
                book_seat(session, DEMO_FLIGHT_ID, DEMO_BOOKED_SEAT)
            except Exception as e:
                fatal("Booking seat", e)

            try:
                booked = check_seat_status(session, DEMO_FLIGHT_ID, DEMO_CHECKED_SEAT)
            except Exception as e:
                fatal("Checking seat status", e)

        status = SeatStatusModel(flight_id=DEMO_FLIGHT_ID, seat_no=DEMO_CHECKED_SEAT, booked=booked)
        console.print(status.describe())
    finally:
        db_config.close()


@app.command()
def serve(ctx: typer.Context):
    """Serve template.html on / (host and port from SERVER_HOST / SERVER_PORT)."""
    from flightbook.web import create_app

    config = ctx.obj
    web_app = create_app(config)
    console.print(f"[green]✓[/green] Serving {escape(config.template_path)} on http://{config.server_host}:{config.server_port}/")
    web_app.run(host=config.server_host, port=config.server_port)


def main():
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
