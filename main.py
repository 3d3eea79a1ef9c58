"""Raumstatus: Haupt-CLI.

Verwendung:
  python main.py setup                     Standard-Konfiguration anlegen
  python main.py config show               Konfiguration anzeigen
  python main.py config edit               Konfiguration bearbeiten
  python main.py generate                  Startdaten erzeugen und zusammenfassen
  python main.py floors [--floor N]        Stockwerke mit aktuellem Raumstatus
  python main.py room <raum-id>            Raumdetails, Wochenplan, Wartung
  python main.py search <text>             Räume nach ID/Name suchen
  python main.py summary                   Belegungsbericht
  python main.py lost [--kind lost|found]  Fundbüro anzeigen
  python main.py console [--role admin]    Interaktive Sitzung (Overrides, Meldungen)

Alle Lesebefehle akzeptieren --at "YYYY-MM-DD HH:MM" für einen festen Zeitpunkt.
"""

import logging
import sys
from datetime import datetime
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich import box

console = Console()

_AT_FORMATS = ["%Y-%m-%d %H:%M", "%Y-%m-%dT%H:%M"]


def _load_config():
    """Lädt die Konfiguration; ohne Datei gelten die Standardwerte."""
    from config.manager import ConfigManager
    from config.defaults import default_facility_config
    mgr = ConfigManager()
    if mgr.first_run_check():
        console.print(
            "[dim]Keine Konfiguration gefunden – verwende Standardwerte "
            "(python main.py setup legt eine an).[/dim]"
        )
        return mgr, default_facility_config()
    try:
        return mgr, mgr.load()
    except ValueError as e:
        console.print(f"[red bold]Konfiguration fehlerhaft:[/red bold]\n{escape(str(e))}")
        sys.exit(1)


def _build_service(config, at: Optional[datetime] = None):
    """Erzeugt Startdaten und einen FacilityService (Lebensdauer = Prozess)."""
    from data.seed import FacilityDataGenerator
    from engine import FacilityService, FixedClock, SystemClock

    clock = FixedClock(at) if at else SystemClock()
    data = FacilityDataGenerator(config).generate(now=clock.now())
    return FacilityService.from_data(data, clock=clock, config=config.service)


def _at_option(f):
    return click.option(
        "--at", "at", type=click.DateTime(formats=_AT_FORMATS), default=None,
        help='Fester Zeitpunkt, z.B. "2026-10-19 10:30" (Standard: jetzt).',
    )(f)


# ─── AUSGABE ──────────────────────────────────────────────────────────────────

def _print_floor(floor) -> None:
    from export.tui_renderer import render_floor_rows

    table = Table(title=f"Stockwerk {floor.floor_number}", box=box.ROUNDED)
    table.add_column("ID", style="dim")
    table.add_column("Raum", style="bold")
    table.add_column("Plätze", justify="right")
    table.add_column("Status")
    table.add_column("Aktivität")
    table.add_column("Override", style="magenta")
    for row in render_floor_rows(floor):
        table.add_row(*row)
    console.print(table)


def _print_room(service, room_id: str, schedule_config) -> None:
    from export.tui_renderer import render_week_rows, status_markup
    from models.schedule import DAY_NAMES

    room = service.get_room(room_id)
    activity = f"  |  {room.current_activity}" if room.current_activity else ""
    override = (
        f"\nOverride: [magenta]{room.manual_override.value}[/magenta]"
        if room.manual_override else ""
    )
    console.print(Panel(
        f"[bold]{room.name}[/bold] ({room.id})  |  Stockwerk {room.floor}  |  "
        f"{room.capacity} Plätze\n"
        f"Status: {status_markup(room.status.value)}{activity}{override}",
        title="Raum",
        border_style="cyan",
    ))

    week = Table(title="Wochenplan", box=box.ROUNDED)
    week.add_column("Zeit", style="bold")
    for day in schedule_config.days:
        week.add_column(DAY_NAMES[day])
    for row in render_week_rows(service.list_schedules_for_room(room_id),
                                schedule_config):
        week.add_row(*row)
    console.print(week)

    requests = service.list_maintenance_requests(room_id)
    if not requests:
        console.print("[dim]Keine Wartungsmeldungen.[/dim]")
        return
    table = Table(title="Wartung", box=box.ROUNDED)
    table.add_column("ID", style="dim")
    table.add_column("Art")
    table.add_column("Beschreibung")
    table.add_column("Status")
    table.add_column("Gemeldet")
    for r in requests:
        table.add_row(r.id, r.issue_type.value, r.description, r.status.value,
                      f"{r.reported_by}, {r.reported_at:%Y-%m-%d %H:%M}")
    console.print(table)


def _print_lost_items(items) -> None:
    if not items:
        console.print("[dim]Keine Einträge im Fundbüro.[/dim]")
        return
    table = Table(title="Fundbüro", box=box.ROUNDED)
    table.add_column("ID", style="dim")
    table.add_column("Art")
    table.add_column("Gegenstand", style="bold")
    table.add_column("Beschreibung")
    table.add_column("Ort")
    table.add_column("Kontakt")
    table.add_column("Status")
    for i in items:
        status = "[green]resolved[/green]" if i.status.value == "resolved" else "open"
        table.add_row(i.id, i.kind.value, i.item_name, i.description,
                      i.location, i.contact_info, status)
    console.print(table)


def _print_audit_logs(entries) -> None:
    if not entries:
        console.print("[dim]Noch keine Änderungen protokolliert.[/dim]")
        return
    table = Table(title="Audit-Log", box=box.ROUNDED)
    table.add_column("Zeit")
    table.add_column("Raum", style="bold")
    table.add_column("Aktion")
    table.add_column("Nutzer")
    for e in entries:
        table.add_row(f"{e.timestamp:%Y-%m-%d %H:%M:%S}", e.room_name,
                      e.action, e.user)
    console.print(table)


# ─── SETUP ────────────────────────────────────────────────────────────────────

@click.command("setup")
def cmd_setup():
    """Legt die Gebäudekonfiguration mit Standardwerten an."""
    from config.manager import ConfigManager
    from config.defaults import default_facility_config

    mgr = ConfigManager()
    if not mgr.first_run_check():
        console.print(
            "[yellow]Eine Konfiguration existiert bereits.[/yellow]\n"
            "Verwenden Sie [bold]python main.py config edit[/bold] zum Bearbeiten."
        )
        if not click.confirm("Trotzdem neu anlegen?", default=False):
            return

    mgr.save(default_facility_config())
    console.print("[bold green]Einrichtung abgeschlossen![/bold green]")
    console.print("Führen Sie jetzt [bold]python main.py floors[/bold] aus.")


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anzeigen oder bearbeiten."""


@cmd_config.command("show")
def config_show():
    """Zeigt die aktuelle Konfiguration an."""
    from config.manager import show_time_slots_table
    from models.schedule import DAY_NAMES

    mgr, config = _load_config()
    bc = config.building
    console.print(Panel(
        f"[bold]{bc.building_name}[/bold]  |  {bc.num_floors} Stockwerke  |  "
        f"{bc.rooms_per_floor} Räume/Stockwerk  |  "
        f"Kapazität {bc.capacity_min}–{bc.capacity_max}",
        title="Gebäudekonfiguration",
        border_style="cyan",
    ))
    show_time_slots_table(config.schedule)

    sc = config.schedule
    console.print(
        f"\n[bold]Tage:[/bold] {', '.join(DAY_NAMES[d] for d in sc.days)} | "
        f"Belegung: {sc.fill_probability:.0%} | "
        f"{len(sc.courses)} Kurse, {len(sc.instructors)} Lehrende"
    )
    svc = config.service
    console.print(
        f"[bold]Service:[/bold] Audit-Nutzer {svc.default_actor} | "
        f"Verzögerung {svc.simulated_latency_ms} ms | Seed {config.seed}"
    )


@cmd_config.command("edit")
def config_edit():
    """Bearbeitet die Konfiguration interaktiv."""
    mgr, config = _load_config()
    mgr.edit_interactive(config)


# ─── GENERATE ─────────────────────────────────────────────────────────────────

@click.command("generate")
@click.option("--seed", default=None, type=int,
              help="Zufalls-Seed (überschreibt die Konfiguration).")
def cmd_generate(seed: Optional[int]):
    """Erzeugt die Startdaten und zeigt eine Zusammenfassung."""
    from data.seed import FacilityDataGenerator

    mgr, config = _load_config()
    gen = FacilityDataGenerator(config, seed=seed)
    data = gen.generate()
    gen.print_summary(data)
    console.print(f"\n[dim]{data.summary()}[/dim]")


# ─── LESEN ────────────────────────────────────────────────────────────────────

@click.command("floors")
@click.option("--floor", "floor_number", type=int, default=None,
              help="Nur dieses Stockwerk anzeigen.")
@_at_option
def cmd_floors(floor_number: Optional[int], at: Optional[datetime]):
    """Zeigt alle Stockwerke mit effektivem Raumstatus."""
    mgr, config = _load_config()
    service = _build_service(config, at)
    floors = service.list_floors()
    if floor_number is not None:
        floors = [f for f in floors if f.floor_number == floor_number]
        if not floors:
            console.print(f"[red]Stockwerk {floor_number} existiert nicht.[/red]")
            sys.exit(1)
    for floor in floors:
        _print_floor(floor)


@click.command("room")
@click.argument("room_id")
@_at_option
def cmd_room(room_id: str, at: Optional[datetime]):
    """Zeigt Status, Wochenplan und Wartungsmeldungen eines Raums."""
    from engine import FacilityError

    mgr, config = _load_config()
    service = _build_service(config, at)
    try:
        _print_room(service, room_id, config.schedule)
    except FacilityError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)


@click.command("search")
@click.argument("query")
@_at_option
def cmd_search(query: str, at: Optional[datetime]):
    """Sucht Räume nach ID oder Name."""
    from export.tui_renderer import status_markup

    mgr, config = _load_config()
    service = _build_service(config, at)
    hits = service.search_rooms(query)
    if not hits:
        console.print(f"[yellow]Kein Raum passt zu '{query}'.[/yellow]")
        return
    table = Table(title=f"Suche: {query}", box=box.ROUNDED)
    table.add_column("ID", style="dim")
    table.add_column("Raum", style="bold")
    table.add_column("Stockwerk", justify="right")
    table.add_column("Status")
    table.add_column("Aktivität")
    for r in hits:
        table.add_row(r.id, r.name, str(r.floor), status_markup(r.status.value),
                      r.current_activity or "—")
    console.print(table)


@click.command("summary")
@_at_option
def cmd_summary(at: Optional[datetime]):
    """Belegungsbericht pro Stockwerk."""
    from analysis.occupancy_report import OccupancyAnalyzer

    mgr, config = _load_config()
    service = _build_service(config, at)
    analyzer = OccupancyAnalyzer()
    analyzer.print_rich(analyzer.analyze(service.list_floors()))


@click.command("lost")
@click.option("--kind", type=click.Choice(["lost", "found"]), default=None,
              help="Nur Verlust- oder nur Fundmeldungen.")
def cmd_lost(kind: Optional[str]):
    """Zeigt die Einträge des Fundbüros (neueste zuerst)."""
    mgr, config = _load_config()
    service = _build_service(config)
    _print_lost_items(service.list_lost_items(kind))


# ─── INTERAKTIVE SITZUNG ──────────────────────────────────────────────────────

_ADMIN_ONLY = {"3", "5", "8", "9"}


def _run_console(service, schedule_config, role: str) -> None:
    """Menüschleife; Änderungen gelten für die Lebensdauer des Prozesses."""
    from engine import FacilityError
    from models.maintenance import IssueType

    reporter = service.reporter_for(role)
    while True:
        console.print()
        console.print(Panel(
            f"[bold]Raumstatus[/bold]  |  Rolle: {role}",
            border_style="cyan",
        ))
        console.print("  [bold]1.[/bold] Stockwerke anzeigen")
        console.print("  [bold]2.[/bold] Raum anzeigen")
        console.print("  [bold]3.[/bold] Override setzen / löschen")
        console.print("  [bold]4.[/bold] Schaden melden")
        console.print("  [bold]5.[/bold] Wartungsstatus ändern")
        console.print("  [bold]6.[/bold] Fundbüro anzeigen")
        console.print("  [bold]7.[/bold] Verlust / Fund melden")
        console.print("  [bold]8.[/bold] Fundbüro-Eintrag erledigen")
        console.print("  [bold]9.[/bold] Audit-Log")
        console.print("  [bold]0.[/bold] Beenden")

        choice = Prompt.ask("\nAuswahl", default="0")
        if choice == "0":
            break
        if choice in _ADMIN_ONLY and role != "admin":
            console.print("[red]Nur für Administratoren.[/red]")
            continue

        try:
            if choice == "1":
                for floor in service.list_floors():
                    _print_floor(floor)
            elif choice == "2":
                _print_room(service, Prompt.ask("Raum-ID"), schedule_config)
            elif choice == "3":
                room_id = Prompt.ask("Raum-ID")
                status = Prompt.ask(
                    "Neuer Status",
                    choices=["free", "occupied", "reserved", "clear"],
                    default="clear",
                )
                entry = service.set_override(
                    room_id, None if status == "clear" else status, reporter)
                console.print(f"[green]✓[/green] {entry.room_name}: {entry.action}")
            elif choice == "4":
                room_id = Prompt.ask("Raum-ID")
                issue = Prompt.ask("Art", choices=[t.value for t in IssueType],
                                   default="AC")
                description = Prompt.ask("Beschreibung")
                request = service.report_maintenance_issue(
                    room_id, issue, description, reporter)
                console.print(f"[green]✓[/green] Meldung {request.id} angelegt.")
            elif choice == "5":
                request_id = Prompt.ask("Meldungs-ID")
                status = Prompt.ask(
                    "Neuer Status",
                    choices=["pending", "in-progress", "resolved"],
                    default="in-progress",
                )
                request = service.update_maintenance_status(request_id, status)
                console.print(
                    f"[green]✓[/green] Meldung {request.id}: {request.status.value}")
            elif choice == "6":
                kind = Prompt.ask("Filter", choices=["all", "lost", "found"],
                                  default="all")
                _print_lost_items(
                    service.list_lost_items(None if kind == "all" else kind))
            elif choice == "7":
                item = service.report_lost_item(
                    Prompt.ask("Art", choices=["lost", "found"], default="lost"),
                    Prompt.ask("Gegenstand"),
                    Prompt.ask("Beschreibung", default=""),
                    Prompt.ask("Ort", default=""),
                    Prompt.ask("Kontakt", default=""),
                )
                console.print(f"[green]✓[/green] Eintrag {item.id} angelegt.")
            elif choice == "8":
                item = service.resolve_lost_item(Prompt.ask("Eintrags-ID"))
                console.print(f"[green]✓[/green] {item.item_name}: erledigt.")
            elif choice == "9":
                _print_audit_logs(service.list_audit_logs())
            else:
                console.print("[yellow]Ungültige Auswahl.[/yellow]")
        except FacilityError as e:
            console.print(f"[red]{escape(str(e))}[/red]")


@click.command("console")
@click.option("--role", type=click.Choice(["user", "admin"]), default="user",
              help="Rolle der Sitzung (Overrides nur für admin).")
@_at_option
def cmd_console(role: str, at: Optional[datetime]):
    """Interaktive Sitzung mit Lese- und Schreibzugriff."""
    mgr, config = _load_config()
    service = _build_service(config, at)
    _run_console(service, config.schedule, role)


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Engine-Protokoll (INFO) auf stderr ausgeben.")
def cli(verbose: bool):
    """Raumstatus: Belegung aus Stundenplan und manuellen Overrides.

    Starten Sie mit: python main.py floors
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main():
    """Einstiegspunkt."""
    cli()


# Befehle registrieren
cli.add_command(cmd_setup)
cli.add_command(cmd_config)
cli.add_command(cmd_generate)
cli.add_command(cmd_floors)
cli.add_command(cmd_room)
cli.add_command(cmd_search)
cli.add_command(cmd_summary)
cli.add_command(cmd_lost)
cli.add_command(cmd_console)


if __name__ == "__main__":
    main()
