"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.application_commands import (
    expire,
    list_applications,
    register,
)

__all__ = [
    "expire",
    "list_applications",
    "register",
]
