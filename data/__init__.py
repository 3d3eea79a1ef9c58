"""Startdaten für das Gebäude (Räume, Stundenplan, Fundbüro)."""
