"""Fritter backend."""
