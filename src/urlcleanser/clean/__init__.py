"""Tracking parameter classification and URL cleaning."""
