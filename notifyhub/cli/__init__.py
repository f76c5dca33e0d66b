"""notifyhub CLI — Typer-based command-line interface.

Provides the ``notifyhub`` command with subcommands for running the demo
scenario, sending a single notification and listing channels.

All output uses Rich for formatted terminal display.
"""
