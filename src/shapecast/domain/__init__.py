"""Domain layer — guards and validator combinators.

This layer depends only on stdlib.
It must never import from config, output, commands, or the CLI.
"""
