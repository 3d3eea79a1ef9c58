"""Belegungsbericht: Status-Verteilung pro Stockwerk und gesamt.

Arbeitet auf den bereits aufgelösten FloorViews des FacilityService und
rechnet selbst keinen Status aus.
"""

from pydantic import BaseModel

from models.room import RoomStatus
from models.status import FloorView


# ─── Metriken-Modelle ─────────────────────────────────────────────────────────

class FloorOccupancy(BaseModel):
    """Statuszählung für ein Stockwerk."""

    floor_number: int
    total_rooms: int
    free: int
    occupied: int
    reserved: int
    overridden: int          # Räume mit manuellem Override
    free_seats: int          # Summe der Kapazität freier Räume

    @property
    def occupancy_rate(self) -> float:
        """Anteil nicht freier Räume (0.0–1.0)."""
        if self.total_rooms == 0:
            return 0.0
        return (self.occupied + self.reserved) / self.total_rooms


class OccupancyReport(BaseModel):
    """Gebäudeweiter Belegungsbericht."""

    floors: list[FloorOccupancy]
    total_rooms: int
    free: int
    occupied: int
    reserved: int
    overridden: int
    occupancy_rate: float


# ─── Analyzer ─────────────────────────────────────────────────────────────────

class OccupancyAnalyzer:
    """Zählt effektive Raumstatus pro Stockwerk."""

    def analyze(self, floors: list[FloorView]) -> OccupancyReport:
        metrics = [self._floor_metrics(f) for f in floors]

        total = sum(m.total_rooms for m in metrics)
        occupied = sum(m.occupied for m in metrics)
        reserved = sum(m.reserved for m in metrics)
        rate = (occupied + reserved) / total if total > 0 else 0.0

        return OccupancyReport(
            floors=metrics,
            total_rooms=total,
            free=sum(m.free for m in metrics),
            occupied=occupied,
            reserved=reserved,
            overridden=sum(m.overridden for m in metrics),
            occupancy_rate=round(rate, 4),
        )

    def _floor_metrics(self, floor: FloorView) -> FloorOccupancy:
        counts = {s: 0 for s in RoomStatus}
        free_seats = 0
        for room in floor.rooms:
            counts[room.status] += 1
            if room.status == RoomStatus.FREE:
                free_seats += room.capacity
        return FloorOccupancy(
            floor_number=floor.floor_number,
            total_rooms=len(floor.rooms),
            free=counts[RoomStatus.FREE],
            occupied=counts[RoomStatus.OCCUPIED],
            reserved=counts[RoomStatus.RESERVED],
            overridden=sum(1 for r in floor.rooms if r.manual_override is not None),
            free_seats=free_seats,
        )

    def print_rich(self, report: OccupancyReport) -> None:
        """Gibt den Belegungsbericht formatiert über Rich aus."""
        from rich.console import Console
        from rich.table import Table
        from rich import box

        console = Console()
        table = Table(title="Belegung", box=box.ROUNDED)
        table.add_column("Stockwerk", style="bold")
        table.add_column("Räume", justify="right")
        table.add_column("[green]Frei[/green]", justify="right")
        table.add_column("[red]Belegt[/red]", justify="right")
        table.add_column("[yellow]Reserviert[/yellow]", justify="right")
        table.add_column("Override", justify="right")
        table.add_column("Freie Plätze", justify="right")
        table.add_column("Auslastung", justify="right")

        for m in report.floors:
            table.add_row(
                str(m.floor_number), str(m.total_rooms), str(m.free),
                str(m.occupied), str(m.reserved), str(m.overridden),
                str(m.free_seats), f"{m.occupancy_rate:.0%}",
            )
        table.add_row(
            "[bold]Gesamt[/bold]", f"[bold]{report.total_rooms}[/bold]",
            str(report.free), str(report.occupied), str(report.reserved),
            str(report.overridden),
            str(sum(m.free_seats for m in report.floors)),
            f"[bold]{report.occupancy_rate:.0%}[/bold]",
        )
        console.print(table)
