"""Konfigurationsmanager: Laden, Speichern, Validieren und interaktives Bearbeiten.

Nutzt ruamel.yaml für YAML-Serialisierung mit Kommentaren.
"""

import json
from datetime import date
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, FloatPrompt, IntPrompt, Prompt
from rich.table import Table
from rich import box
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap
from pydantic import ValidationError

from config.schema import (
    BuildingConfig,
    FacilityConfig,
    ScheduleConfig,
    ServiceConfig,
    TimeSlotDef,
)

console = Console()
yaml = YAML()
yaml.default_flow_style = False
yaml.width = 120


# ─── YAML-KOMMENTAR-AUFBAU ───

_YAML_HEADER = f"""\
# ============================================
# Raumstatus - Gebäudekonfiguration
# Version: 1.0
# Erstellt: {date.today().isoformat()}
# ============================================
"""

_SECTION_COMMENTS = {
    "building": (
        "Gebäude",
        "Stockwerke und Räume sind fest; Kapazität wird zufällig im Bereich gewählt.",
    ),
    "schedule": (
        "Stundenplan",
        "Wochentage: 0=So, 1=Mo, ..., 6=Sa. Zeitfenster im Format HH:MM.",
    ),
    "service": (
        "Service",
        "simulated_latency_ms nur für Tests; 0 = keine Verzögerung.",
    ),
    "seed": (
        "Zufalls-Seed",
        None,
    ),
}


class ConfigManager:
    CONFIG_DIR = Path("config")
    DEFAULT_CONFIG = CONFIG_DIR / "facility_config.yaml"

    def first_run_check(self) -> bool:
        """Gibt True zurück wenn noch keine Config existiert (Erstaufruf)."""
        return not self.DEFAULT_CONFIG.exists()

    # ─── Laden ───

    def load(self, path: Optional[Path] = None) -> FacilityConfig:
        """Lade Config aus YAML. Validiert automatisch via Pydantic."""
        target = path or self.DEFAULT_CONFIG
        if not target.exists():
            raise FileNotFoundError(
                f"Konfigurationsdatei nicht gefunden: {target}\n"
                f"Führen Sie 'python main.py setup' aus, um das Gebäude einzurichten."
            )
        with open(target, "r", encoding="utf-8") as f:
            raw = yaml.load(f)
        try:
            return FacilityConfig.model_validate(dict(raw or {}))
        except Exception as e:
            raise ValueError(
                f"Konfigurationsdatei ungültig: {target}\n"
                f"Pydantic-Fehler: {e}"
            ) from e

    # ─── Speichern ───

    def save(self, config: FacilityConfig, path: Optional[Path] = None) -> None:
        """Speichere Config als YAML mit Kommentaren."""
        target = path or self.DEFAULT_CONFIG
        target.parent.mkdir(parents=True, exist_ok=True)

        data = self._build_commented_yaml(config)

        with open(target, "w", encoding="utf-8") as f:
            f.write(_YAML_HEADER + "\n")
            yaml.dump(data, f)

        console.print(f"[green]✓[/green] Konfiguration gespeichert: {target}")

    def _build_commented_yaml(self, config: FacilityConfig) -> CommentedMap:
        """Baut die YAML-Struktur mit Kommentaren auf."""
        raw = json.loads(config.model_dump_json())
        cm = CommentedMap(raw)

        for field, (label, comment) in _SECTION_COMMENTS.items():
            cm.yaml_set_comment_before_after_key(
                field,
                before=f"\n─── {label} ───" + (f"\n{comment}" if comment else ""),
            )

        if "service" in cm:
            service_map = CommentedMap(cm["service"])
            service_map.yaml_add_eol_comment("Audit-Nutzer", "default_actor")
            cm["service"] = service_map

        return cm

    # ─── Interaktives Bearbeiten ───

    def edit_interactive(self, config: FacilityConfig) -> FacilityConfig:
        """Interaktives Bearbeitungsmenü für die Konfiguration."""
        while True:
            console.print()
            console.print(Panel(
                "[bold]Konfiguration bearbeiten[/bold]",
                border_style="cyan",
            ))
            console.print("  [bold]1.[/bold] Gebäude (Stockwerke, Räume, Kapazität)")
            console.print("  [bold]2.[/bold] Stundenplan (Tage, Zeitfenster, Belegung)")
            console.print("  [bold]3.[/bold] Service (Audit-Nutzer, Verzögerung)")
            console.print("  [bold]0.[/bold] Speichern & Zurück")

            choice = Prompt.ask("\nAuswahl", default="0")

            if choice == "1":
                config = config.model_copy(
                    update={"building": self._edit_building(config.building)}
                )
            elif choice == "2":
                config = config.model_copy(
                    update={"schedule": self._edit_schedule(config.schedule)}
                )
            elif choice == "3":
                config = config.model_copy(
                    update={"service": self._edit_service(config.service)}
                )
            elif choice == "0":
                self.save(config)
                break
            else:
                console.print("[yellow]Ungültige Auswahl.[/yellow]")

        return config

    def _edit_building(self, bc: BuildingConfig) -> BuildingConfig:
        """Gebäude interaktiv anpassen."""
        _show_parameter_table(bc.model_dump())
        if not Confirm.ask("Änderungen vornehmen?", default=False):
            return bc
        return BuildingConfig(
            building_name=Prompt.ask("Gebäudename", default=bc.building_name),
            room_prefix=Prompt.ask("Raum-Präfix", default=bc.room_prefix),
            num_floors=IntPrompt.ask("Stockwerke", default=bc.num_floors),
            rooms_per_floor=IntPrompt.ask("Räume pro Stockwerk",
                                          default=bc.rooms_per_floor),
            capacity_min=IntPrompt.ask("Minimale Kapazität", default=bc.capacity_min),
            capacity_max=IntPrompt.ask("Maximale Kapazität", default=bc.capacity_max),
        )

    def _edit_schedule(self, sc: ScheduleConfig) -> ScheduleConfig:
        """Stundenplan-Parameter interaktiv anpassen."""
        show_time_slots_table(sc)

        slots = list(sc.time_slots)
        while True:
            console.print("\n[1] Zeitfenster hinzufügen  [2] Zeitfenster entfernen  "
                          "[0] Fertig")
            sub = Prompt.ask("Auswahl", default="0")
            if sub == "0":
                break
            elif sub == "1":
                start = Prompt.ask("Beginn (HH:MM)")
                end = Prompt.ask("Ende (HH:MM)")
                try:
                    slots.append(TimeSlotDef(start_time=start, end_time=end))
                except ValidationError as e:
                    console.print(f"[red]Zeitfenster ungültig:[/red] {escape(str(e))}")
                    continue
                slots.sort(key=lambda s: s.start_time)
            elif sub == "2":
                start = Prompt.ask("Beginn des zu entfernenden Zeitfensters")
                slots = [s for s in slots if s.start_time != start]

        raw_days = Prompt.ask(
            "Unterrichtstage (0=So ... 6=Sa, kommagetrennt)",
            default=",".join(str(d) for d in sc.days),
        )
        fill = FloatPrompt.ask("Belegungswahrscheinlichkeit",
                               default=sc.fill_probability)
        try:
            return ScheduleConfig.model_validate({
                **sc.model_dump(),
                "time_slots": [s.model_dump() for s in slots],
                "days": [d.strip() for d in raw_days.split(",") if d.strip()],
                "fill_probability": fill,
            })
        except ValidationError as e:
            console.print(f"[red]Änderungen verworfen:[/red] {escape(str(e))}")
            return sc

    def _edit_service(self, svc: ServiceConfig) -> ServiceConfig:
        """Service-Verhalten interaktiv anpassen."""
        _show_parameter_table(svc.model_dump())
        if not Confirm.ask("Änderungen vornehmen?", default=False):
            return svc
        return ServiceConfig(
            default_actor=Prompt.ask("Audit-Nutzer", default=svc.default_actor),
            simulated_latency_ms=IntPrompt.ask("Verzögerung (ms)",
                                               default=svc.simulated_latency_ms),
            seed_lost_items=Confirm.ask("Fundbüro-Beispiele anlegen?",
                                        default=svc.seed_lost_items),
        )


def _show_parameter_table(values: dict) -> None:
    table = Table(box=box.SIMPLE)
    table.add_column("Parameter", style="bold")
    table.add_column("Aktuell")
    for k, v in values.items():
        table.add_row(k, str(v))
    console.print(table)


def show_time_slots_table(sc: ScheduleConfig) -> None:
    """Zeigt das Tagesraster als rich-Tabelle an."""
    table = Table(title="Zeitfenster", box=box.ROUNDED)
    table.add_column("Nr.", style="bold", width=5)
    table.add_column("Beginn", width=8)
    table.add_column("Ende", width=8)
    for i, slot in enumerate(sc.time_slots, start=1):
        table.add_row(str(i), slot.start_time, slot.end_time)
    console.print(table)
