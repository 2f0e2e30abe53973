"""High-level API for library usage of grouped_release_notes."""

from .assembler import CommitTemplate
from .core.config import DEFAULT_API_URL, Downloads, GitHubConfig, GroupingConfig, ReleaseNotesConfig
from .core.interfaces import NullProgressReporter, ProgressReporter
from .generator import ReleaseNotesGenerator


class ReleaseNotesClient:
	"""High-level client for generating and publishing release notes."""

	def __init__(
		self,
		config: ReleaseNotesConfig,
		progress_reporter: ProgressReporter | None = None,
	):
		self.config = config
		self.progress_reporter = progress_reporter or NullProgressReporter()

	def generate_release_notes(self, tag: str | None = None) -> str:
		"""Generate release notes for a tag.

		Args:
			tag: Git tag for the release. Defaults to the latest tag.

		Returns:
			Release notes as markdown
		"""
		generator = ReleaseNotesGenerator(self.config, self.progress_reporter)
		_, notes = generator.generate(tag)
		return notes

	def publish_release(self, tag: str | None = None) -> str:
		"""Generate release notes and create the GitHub release.

		Returns:
			The published release notes
		"""
		generator = ReleaseNotesGenerator(self.config, self.progress_reporter)
		return generator.run(tag)


class ReleaseNotesBuilder:
	"""Builder pattern for constructing ReleaseNotesClient."""

	def __init__(self):
		self._github_token = None
		self._repository_url = None
		self._api_url = DEFAULT_API_URL
		self._group_by = None
		self._type_pattern = None
		self._type_of = None
		self._commit_template = None
		self._downloads = None
		self._progress_reporter = None

	def with_github_token(self, token: str) -> "ReleaseNotesBuilder":
		"""Set GitHub authentication token."""
		self._github_token = token
		return self

	def with_repository(self, url: str, api_url: str = DEFAULT_API_URL) -> "ReleaseNotesBuilder":
		"""Set the repository URL and the API serving it."""
		self._repository_url = url
		self._api_url = api_url
		return self

	def with_groups(self, group_by: dict[str, list[str]]) -> "ReleaseNotesBuilder":
		"""Set the groups, in the order they appear in the notes."""
		self._group_by = group_by
		return self

	def with_type_pattern(self, pattern: str) -> "ReleaseNotesBuilder":
		"""Extract the commit type with a regular expression."""
		self._type_pattern = pattern
		return self

	def with_type_extractor(self, type_of) -> "ReleaseNotesBuilder":
		"""Extract the commit type with a callable taking the commit message."""
		self._type_of = type_of
		return self

	def with_commit_template(self, template: str | CommitTemplate) -> "ReleaseNotesBuilder":
		"""Set the format pattern or callable rendering a commit line."""
		self._commit_template = template
		return self

	def with_downloads(self, downloads: Downloads) -> "ReleaseNotesBuilder":
		"""Append download links to the notes."""
		self._downloads = downloads
		return self

	def with_progress_reporter(self, reporter: ProgressReporter) -> "ReleaseNotesBuilder":
		"""Set custom progress reporter."""
		self._progress_reporter = reporter
		return self

	def build(self) -> ReleaseNotesClient:
		"""Build the client with configured options.

		Raises:
			ConfigurationError: If required configuration is missing
		"""
		grouping_kwargs = {
			"type_pattern": self._type_pattern,
			"type_of": self._type_of,
			"commit_template": self._commit_template,
		}
		if self._group_by is not None:
			grouping_kwargs["group_by"] = self._group_by

		config = ReleaseNotesConfig(
			github=GitHubConfig(
				token=self._github_token or "",
				repository_url=self._repository_url or "",
				api_url=self._api_url,
			),
			grouping=GroupingConfig(**grouping_kwargs),
			downloads=self._downloads,
		)

		return ReleaseNotesClient(config, self._progress_reporter)
