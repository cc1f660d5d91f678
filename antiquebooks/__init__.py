"""Antique Books catalog API."""
