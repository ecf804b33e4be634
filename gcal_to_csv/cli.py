# gcal_to_csv/cli.py
from __future__ import annotations

import logging
from typing import List, NoReturn

import click
import typer
from typer.core import TyperCommand
from rich.markup import escape

from .theme import print, err_console
from .log import setup_logging
from .core.options import InvalidArgument, parse_args
from .integrations.google_auth import CredentialsNotFound, load_credentials
from .integrations.gcal_client import CalendarNotFound, build_service
from .features.calendar_to_csv import collect_records
from .storage.csv_sink import write_records

app = typer.Typer(
    help="Exporte les prochains événements d’un agenda Google en CSV.",
    add_completion=False,
)

_EPILOG = (
    "Options: --calendar-id ID (défaut: primary) · --output CHEMIN "
    "(défaut: calendar_events.csv) · --max-results N (défaut: 2500) · -v/--verbose"
)


class RawArgsCommand(TyperCommand):
    """Laisse tous les tokens intacts dans ctx.args ; seul un '--help' isolé affiche l'aide."""

    def parse_args(self, ctx: click.Context, args: List[str]) -> List[str]:
        if args == ["--help"]:
            return super().parse_args(ctx, args)
        ctx.args = list(args)
        return ctx.args


def _fail(message: str) -> NoReturn:
    err_console.print(f"[err]{message}[/]")
    raise typer.Exit(code=1)


# ──────────────────────────────────────────────────────────────────────────────
# Google Calendar → CSV
# ──────────────────────────────────────────────────────────────────────────────
@app.command(cls=RawArgsCommand, epilog=_EPILOG)
def export(ctx: typer.Context):
    """
    Récupère les événements à venir (occurrences dépliées, triées par début)
    et les écrit dans un CSV à 15 colonnes.
    Les flags sont lus tels quels : un flag sans valeur ou inconnu est ignoré.
    """
    # avant tout appel réseau
    try:
        opts = parse_args(ctx.args)
    except InvalidArgument as e:
        _fail(escape(str(e)))

    setup_logging(logging.DEBUG if opts.verbose else logging.WARNING)

    try:
        creds = load_credentials()
    except CredentialsNotFound as e:
        _fail(escape(str(e)))

    service = build_service(creds)
    try:
        records = collect_records(service, opts.calendar_id, opts.max_results)
    except CalendarNotFound as e:
        _fail(
            f"Agenda '{escape(e.calendar_id)}' introuvable. Vérifie l’ID de l’agenda "
            "et qu’il est bien partagé avec ce compte."
        )

    n = write_records(records, opts.output)
    print(f"[ok]{n} événements écrits dans '{escape(opts.output)}'.[/]")


# ──────────────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    app()
