"""Konfiguration: Pydantic-Schema, Standardwerte, YAML-Manager."""
