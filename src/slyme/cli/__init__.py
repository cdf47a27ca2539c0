"""Command-line entry points (see app.py)."""
