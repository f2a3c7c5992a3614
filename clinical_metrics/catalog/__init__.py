"""Embedded clinical reference data."""
