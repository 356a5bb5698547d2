# ike/cli/commands/__init__.py
"""CLI command implementations."""
