"""CLI adapter for progress reporting."""

from ..core.interfaces import ProgressEvent, ProgressReporter
from ..ui import CLI


class CLIProgressReporter(ProgressReporter):
	"""Adapt ProgressReporter interface to the CLI class."""

	def __init__(self, cli: CLI):
		self.cli = cli

	def report(self, event: ProgressEvent) -> None:
		"""Route progress events to appropriate CLI methods."""
		metadata = event.metadata or {}
		if event.type == "commit":
			self.cli.show_commit(event.message, shipped=metadata.get("shipped", False))
		elif event.type == "success":
			self.cli.show_success(event.message)
		elif event.type == "error":
			self.cli.show_error(event.message)
		elif event.type == "info":
			self.cli.show_info(event.message)
		elif event.type == "release_notes":
			self.cli.show_release_notes(metadata.get("heading", "Release Notes"), event.message)
