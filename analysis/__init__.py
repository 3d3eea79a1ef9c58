"""Auswertungen auf aufgelösten Raum-Snapshots."""
