import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from ..assembler import CommitTemplate, default_commit_template, format_commit_template
from ..classifier import DEFAULT_GROUP_BY, ClassificationRule, type_of_pattern
from ..models import Repository
from ..models._utils import default_type_of
from .errors import ConfigurationError

DEFAULT_API_URL = "https://api.github.com"

# label -> url, or a callable (repository, tag name) -> {label: url}
Downloads = Mapping[str, str] | Callable[[Repository, str], Mapping[str, str]]


@dataclass(frozen=True)
class GitHubConfig:
	token: str
	repository_url: str
	api_url: str = DEFAULT_API_URL

	def __post_init__(self):
		if not self.token:
			raise ConfigurationError("Missing GitHub access token")
		if not self.repository_url:
			raise ConfigurationError("Missing repository url")
		if Repository.from_url(self.repository_url) is None:
			raise ConfigurationError(f"Invalid repository url: {self.repository_url}")
		if not self.api_url:
			raise ConfigurationError("Missing GitHub API url")

	@property
	def repository(self) -> Repository:
		return Repository.from_url(self.repository_url)


@dataclass(frozen=True)
class GroupingConfig:
	"""Configuration for classifying commits into groups.

	Attributes:
		group_by: Group name -> commit types. Declaration order is the order of
			the sections, and the first group claiming a type wins.
		type_pattern: Regular expression whose first group is the commit type.
			Defaults to the text before the first colon.
		type_of: Callable extracting the type, takes precedence over type_pattern.
		commit_template: `str.format` pattern or callable rendering one commit line.
	"""

	group_by: dict[str, tuple[str, ...]] = field(default_factory=lambda: dict(DEFAULT_GROUP_BY))
	type_pattern: str | None = None
	type_of: Callable[[str], str] | None = None
	commit_template: str | CommitTemplate | None = None

	def __post_init__(self):
		if not self.group_by:
			raise ConfigurationError("At least one group is required")

		normalized = {}
		for group, types in self.group_by.items():
			if isinstance(types, str):
				types = (types,)
			if (
				not group
				or not isinstance(types, (list, tuple))
				or not all(isinstance(t, str) and t for t in types)
			):
				raise ConfigurationError(f"Invalid types for group {group!r}: {types!r}")
			normalized[group] = tuple(t.lower() for t in types)
		object.__setattr__(self, "group_by", normalized)

		if self.type_pattern:
			try:
				re.compile(self.type_pattern)
			except re.error as e:
				raise ConfigurationError(f"Invalid type pattern {self.type_pattern!r}: {e}") from e

		if self.type_of is not None and not callable(self.type_of):
			raise ConfigurationError(f"type_of must be callable, got {self.type_of!r}; use type_pattern in config files")

	def get_rule(self) -> ClassificationRule:
		if self.type_of:
			type_of = self.type_of
		elif self.type_pattern:
			type_of = type_of_pattern(self.type_pattern)
		else:
			type_of = default_type_of

		return ClassificationRule(group_by=self.group_by, type_of=type_of)

	def get_template(self) -> CommitTemplate:
		if self.commit_template is None:
			return default_commit_template
		if isinstance(self.commit_template, str):
			return format_commit_template(self.commit_template)
		return self.commit_template


@dataclass(frozen=True)
class ReleaseNotesConfig:
	github: GitHubConfig
	grouping: GroupingConfig = field(default_factory=GroupingConfig)
	downloads: Downloads | None = None
	downloads_heading: str = "Downloads"
