#!/usr/bin/env python
"""Grouped Release Notes CLI."""

import logging
from pathlib import Path

import typer

from .adapters.cli_progress import CLIProgressReporter
from .core.config_loader import TomlConfigLoader
from .core.errors import ReleaseNotesError
from .generator import ReleaseNotesGenerator
from .setup_command import setup_config
from .ui import CLI

app = typer.Typer(
	help="Publish GitHub releases with notes grouped by commit type",
	invoke_without_command=True,
	no_args_is_help=True,
)


@app.callback()
def callback():
	"""Publish GitHub releases with notes grouped by commit type."""
	pass


@app.command()
def generate(
	tag: str | None = typer.Option(None, "--tag", help="Tag to release (default: latest tag)"),
	config_path: Path | None = typer.Option(None, "--config-path", help="Path to config file"),
	dry_run: bool = typer.Option(False, "--dry-run", help="Print the release notes without publishing them"),
	verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests and pipeline decisions"),
):
	"""Generate release notes for a tag and publish them as a GitHub release.

	Configuration is read from ./release-notes.toml or
	~/.grouped-release-notes/config.toml. GH_TOKEN, GH_REPOSITORY and GH_API_URL
	override the file.
	"""
	logging.basicConfig(
		level=logging.DEBUG if verbose else logging.WARNING,
		format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
	)

	cli = CLI()
	try:
		config = TomlConfigLoader(config_path).load()
		generator = ReleaseNotesGenerator(config, CLIProgressReporter(cli))
		generator.run(tag, dry_run=dry_run)
	except ReleaseNotesError as e:
		cli.show_error(str(e))
		raise typer.Exit(code=1)


@app.command()
def setup(
	config_path: Path | None = typer.Option(
		None,
		"--config-path",
		help="Path to config file (default: ./release-notes.toml)",
	),
) -> None:
	"""Interactive setup to create or update the configuration file."""
	setup_config(config_path=config_path)


if __name__ == "__main__":
	app()
