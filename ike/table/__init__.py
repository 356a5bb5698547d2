# ike/table/__init__.py
"""Labelled example tables."""

from .models import Table, TableRow, TableValue, load_table

__all__ = ["Table", "TableRow", "TableValue", "load_table"]
