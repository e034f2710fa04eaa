"""
THEOLOGOS - Command Line Interface

Entry point for the theologos citation inspection commands.
"""
from cli.main import app, main

__all__ = ["app", "main"]
