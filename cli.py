"""CLI commands for wedding RSVP management."""

import asyncio
from pathlib import Path

import typer
import uvicorn

from src.config.settings import settings
from src.rsvps.dtos import RSVPValidationError
from src.rsvps.export import rsvps_to_csv
from src.rsvps.features.submit_rsvp.form import parse_submission
from src.rsvps.repository.read_models import SqlRSVPReadModel
from src.rsvps.repository.write_models import SqlRSVPWriteModel

app = typer.Typer(help="CLI commands for wedding RSVP management")


@app.command()
def create_rsvp(
    name: str = typer.Option(..., "--name", "-n", help="Guest name"),
    email: str = typer.Option(..., "--email", "-e", help="Guest email"),
    attending: bool = typer.Option(
        True,
        "--attending/--not-attending",
        help="Whether the guest is coming",
    ),
    guests: int = typer.Option(1, "--guests", "-g", help="Number of guests in the party"),
    dietary_restrictions: str = typer.Option(
        None,
        "--dietary",
        "-d",
        help="Dietary restrictions or allergies",
    ),
    message: str = typer.Option(None, "--message", "-m", help="Message for the couple"),
):
    """Store an RSVP, validated the same way as the public form."""
    try:
        submission = parse_submission(
            name=name,
            email=email,
            attending="true" if attending else "false",
            guests=str(guests),
            dietary_restrictions=dietary_restrictions,
            message=message,
        )
    except RSVPValidationError as e:
        typer.secho(e.message, fg=typer.colors.RED)
        raise typer.Exit(1)

    rsvp = asyncio.run(SqlRSVPWriteModel().create_rsvp(submission))

    typer.secho("RSVP stored!", fg=typer.colors.GREEN)
    typer.secho(f"  ID: {rsvp.id}", fg=typer.colors.CYAN)
    typer.secho(f"  Name: {rsvp.name}", fg=typer.colors.BLUE)
    typer.secho(f"  Attending: {'Yes' if rsvp.attending else 'No'}", fg=typer.colors.BLUE)


@app.command()
def list_rsvps(
    limit: int = typer.Option(
        None,
        "--limit",
        "-l",
        help="Only show the most recent N responses",
    ),
):
    """List RSVPs, newest first."""
    read_model = SqlRSVPReadModel()
    if limit:
        rsvps = asyncio.run(read_model.list_recent(limit))
    else:
        rsvps = asyncio.run(read_model.list_all())

    if not rsvps:
        typer.secho("No RSVPs yet", fg=typer.colors.YELLOW)
        return

    for rsvp in rsvps:
        if rsvp.attending:
            status = f"attending with {rsvp.guests} guest{'s' if rsvp.guests > 1 else ''}"
            color = typer.colors.GREEN
        else:
            status = "cannot attend"
            color = typer.colors.RED
        typer.secho(f"  - {rsvp.name} <{rsvp.email}>: {status}", fg=color)


@app.command()
def stats():
    """Show total responses, attending count and guest headcount."""
    summary = asyncio.run(SqlRSVPReadModel().get_stats())

    typer.secho("RSVP Summary", fg=typer.colors.GREEN)
    typer.secho(f"  Total Responses: {summary.total}", fg=typer.colors.BLUE)
    typer.secho(f"  Attending: {summary.attending}", fg=typer.colors.BLUE)
    typer.secho(f"  Total Guests: {summary.total_guests}", fg=typer.colors.BLUE)


@app.command()
def export_csv(
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="File to write the CSV to (prints to stdout when omitted)",
    ),
):
    """Export every RSVP as CSV."""
    rsvps = asyncio.run(SqlRSVPReadModel().list_all())
    document = rsvps_to_csv(rsvps)

    if output is None:
        typer.echo(document, nl=False)
        return

    output.write_text(document, encoding="utf-8", newline="")
    typer.secho(f"Exported {len(rsvps)} RSVPs to {output}", fg=typer.colors.GREEN)


@app.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the web app."""
    uvicorn.run(
        "src.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=reload,
    )


if __name__ == "__main__":
    app()
