"""Subcommands of the shapecast CLI, one module per command."""
