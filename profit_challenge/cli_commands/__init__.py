"""Command registrations for the Typer CLI.

`profit_challenge/cli.py` stays the entrypoint module (the console script
points at `profit_challenge.cli:main`); commands live in this package and are
registered from there.
"""
