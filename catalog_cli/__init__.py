"""Catalog CLI - terminal client for the catalog API."""

__version__ = "0.1.0"
