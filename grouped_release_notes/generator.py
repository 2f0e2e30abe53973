"""Release notes pipeline: tags -> range -> commits -> groups -> note -> release."""

import logging
from typing import TYPE_CHECKING

from .assembler import assemble
from .classifier import classify
from .core.config import ReleaseNotesConfig
from .core.errors import ConfigurationError
from .core.interfaces import NullProgressReporter, ProgressEvent, ProgressReporter
from .github_client import GitHubClient
from .models import ClassifiedCommit, LinkSection, RawCommit, TagRange
from .tag_range import select_range
from .window import fetch_commits, resolve_window

if TYPE_CHECKING:
	from .core.interfaces import CommitSource, ReleasePublisher, TagSource

logger = logging.getLogger(__name__)


class ReleaseNotesGenerator:
	def __init__(
		self,
		config: ReleaseNotesConfig,
		progress_reporter: ProgressReporter | None = None,
		github: "TagSource | CommitSource | ReleasePublisher | None" = None,
	):
		self.config = config
		self.progress_reporter = progress_reporter or NullProgressReporter()
		self.github = github or GitHubClient(
			config.github.token,
			config.github.repository,
			config.github.api_url,
		)
		self.rule = config.grouping.get_rule()
		self.template = config.grouping.get_template()

	def get_tag_range(self, tag: str | None = None) -> TagRange:
		tag_range = select_range(self.github.list_tags(), tag)
		logger.info("Selected tag %s (previous: %s)", tag_range.compare.name, tag_range.base and tag_range.base.name)
		self._report("info", f">>>> tag: {tag_range.compare.name}")
		return tag_range

	def get_commits(self, tag_range: TagRange) -> list[RawCommit]:
		plan = resolve_window(tag_range)
		logger.info("Fetching commits with %s", plan)
		return fetch_commits(plan, self.github)

	def classify(self, commits: list[RawCommit]) -> list[ClassifiedCommit]:
		"""Keep the commits that belong to a group, reporting each decision."""
		classified = []
		for commit in commits:
			result = classify(commit, self.rule)
			if result:
				classified.append(result)
				self._report("commit", f"shipped: {commit.title}", shipped=True)
			else:
				self._report("commit", f"omitted: {commit.title}", shipped=False)

		return classified

	def get_extra_sections(self, tag_name: str) -> list[LinkSection]:
		downloads = self.config.downloads
		if not downloads:
			return []

		if callable(downloads):
			links = dict(downloads(self.config.github.repository, tag_name))
		else:
			links = {label: _format_url(url, tag_name) for label, url in downloads.items()}

		return [LinkSection(heading=self.config.downloads_heading, links=links)]

	def generate(self, tag: str | None = None) -> tuple[str, str]:
		"""Return the released tag name and its release notes."""
		tag_range = self.get_tag_range(tag)
		tag_name = tag_range.compare.name
		classified = self.classify(self.get_commits(tag_range))
		notes = assemble(
			classified,
			self.rule.groups,
			extra_sections=self.get_extra_sections(tag_name),
			template=self.template,
		)
		self._report("release_notes", notes, heading=tag_name)
		return tag_name, notes

	def publish(self, tag_name: str, notes: str) -> None:
		self.github.publish(tag_name, tag_name, notes)
		self._report("success", "Posted release notes to GitHub")

	def run(self, tag: str | None = None, dry_run: bool = False) -> str:
		tag_name, notes = self.generate(tag)
		if not dry_run:
			self.publish(tag_name, notes)

		return notes

	def _report(self, type: str, message: str, **metadata) -> None:
		self.progress_reporter.report(ProgressEvent(type=type, message=message, metadata=metadata or None))


def _format_url(url: str, tag_name: str) -> str:
	"""Fill the {tag} and {version} placeholders of a download url."""
	try:
		return url.format(tag=tag_name, version=tag_name.removeprefix("v"))
	except (KeyError, IndexError, ValueError) as e:
		raise ConfigurationError(f"Invalid download url {url!r}: {e}") from e
