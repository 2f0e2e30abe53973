import typer
from rich.console import Console


class CLI:
	def __init__(self):
		self.console = Console()

	def show_release_notes(self, heading: str, release_notes: str) -> None:
		"""Show release notes between two rules, as they will be posted.

		Args:
			heading (str): The heading of the release notes (tag name).
			release_notes (str): The release notes to show (in markdown format).
		"""
		self.console.rule(heading)
		self.console.print(release_notes, markup=False, highlight=False)
		self.console.rule()

	def show_info(self, message: str) -> None:
		self.console.print(message, markup=False, highlight=False)

	def show_commit(self, message: str, shipped: bool) -> None:
		"""Show a classified commit, green if it is part of the notes, red if not."""
		self.console.print(message, style="green" if shipped else "red", markup=False, highlight=False)

	def show_error(self, message: str) -> None:
		"""Show a red error message, to stderr.

		Args:
			message (str): The error message to show.
		"""
		typer.secho(message, err=True, fg=typer.colors.RED)

	def show_success(self, message: str) -> None:
		"""Show a green success message, to stdout.

		Args:
			message (str): The success message to show.
		"""
		typer.secho(message, fg=typer.colors.GREEN)
