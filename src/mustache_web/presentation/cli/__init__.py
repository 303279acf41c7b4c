"""
CLI (click + rich)
"""

from .template_commands import cli, main

__all__ = ["cli", "main"]
