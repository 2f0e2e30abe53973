"""Example of using grouped_release_notes as a library."""

from grouped_release_notes import (
	ClassificationRule,
	ProgressEvent,
	ProgressReporter,
	ReleaseNotesBuilder,
	assemble,
	classify_all,
)
from grouped_release_notes.models import RawCommit


class CustomProgressReporter(ProgressReporter):
	"""Custom progress reporter that logs to console."""

	def report(self, event: ProgressEvent) -> None:
		print(f"[{event.type.upper()}] {event.message[:100]}")


# Example 1: Basic usage with minimal configuration
def basic_usage():
	"""Generate release notes for the latest tag without publishing them."""
	client = (
		ReleaseNotesBuilder()
		.with_github_token("ghp_xxxxx")  # Replace with your token
		.with_repository("https://github.com/nhn/tui.grid.git")
		.build()
	)

	print(client.generate_release_notes())


# Example 2: Custom groups, download links and publishing
def advanced_usage():
	"""Publish a release with custom groups and progress reporting."""
	client = (
		ReleaseNotesBuilder()
		.with_github_token("ghp_xxxxx")  # Replace with your token
		.with_repository("https://github.com/nhn/tui.grid.git")
		.with_groups(
			{
				"Breaking Changes": ["breaking"],
				"Features": ["feat"],
				"Bug Fixes": ["fix"],
			}
		)
		.with_type_pattern(r"([a-zA-Z]+)(?:\([^)]*\))?!?:")
		.with_downloads(
			{
				"tui-grid.js": "https://uicdn.toast.com/grid/{tag}/tui-grid.js",
				"tui-grid.css": "https://uicdn.toast.com/grid/{tag}/tui-grid.css",
			}
		)
		.with_progress_reporter(CustomProgressReporter())
		.build()
	)

	client.publish_release("v4.0.0")


# Example 3: Offline rendering from commits you already have
def offline_usage():
	"""Render a note without talking to GitHub."""
	rule = ClassificationRule()
	commits = [
		RawCommit(sha="91dccdfasdfasdf", message="feat: a new feature (ref #31)"),
		RawCommit(sha="3bebcfdasdfasdf", message="perf: improve the performance"),
	]
	print(assemble(classify_all(commits, rule), rule.groups))


if __name__ == "__main__":
	offline_usage()
