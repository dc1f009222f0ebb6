"""
mylang CLI package.

The command implementation lives in mylang.cli.commands; this package
re-exports the typer application and the console-script entry point.
"""

from mylang.cli.commands import app, main, version_callback

__all__ = [
    "app",
    "main",
    "version_callback",
]
