"""
framesync CLI Package.

- main.py: Typer app with the layout and merge commands
"""

from framesync.cli.main import app, format_tree, main, version_callback

__all__ = [
    "app",
    "main",
    "format_tree",
    "version_callback",
]
