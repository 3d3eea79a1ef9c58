"""Export-Modul: Tabellenzeilen für die Terminal-Anzeige (Rich)."""

from export.tui_renderer import render_floor_rows, render_week_rows, status_markup

__all__ = ["render_floor_rows", "render_week_rows", "status_markup"]
