"""Sous-package CLI commands - re-exporte les commandes publiques."""

from countarr.adapters.cli.commands.quality_commands import (
    classify,
    group,
    stats,
)

__all__ = [
    "classify",
    "group",
    "stats",
]
