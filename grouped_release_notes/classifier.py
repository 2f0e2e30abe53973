import re
from dataclasses import dataclass, field
from typing import Callable

from .models import ClassifiedCommit, RawCommit
from .models._utils import default_type_of

DEFAULT_GROUP_BY: dict[str, tuple[str, ...]] = {
	"Features": ("feat",),
	"Bug Fixes": ("fix",),
	"Enhancement": ("refactor", "perf"),
	"Documentation": ("docs",),
}


@dataclass(frozen=True)
class ClassificationRule:
	"""Map commit types to named groups.

	The order of `group_by` is significant: it decides which group wins when a
	type is claimed more than once, and the order of the sections in the note.
	"""

	group_by: dict[str, tuple[str, ...]] = field(default_factory=lambda: dict(DEFAULT_GROUP_BY))
	type_of: Callable[[str], str] = default_type_of

	@property
	def groups(self) -> list[str]:
		return list(self.group_by)

	def group_for(self, type_name: str) -> str | None:
		type_name = type_name.lower()
		for group, types in self.group_by.items():
			if any(type_name == t.lower() for t in types):
				return group

		return None


def type_of_pattern(pattern: str) -> Callable[[str], str]:
	"""Build a type extractor from a regular expression.

	The first capturing group of a match at the start of the message is the
	type; a message that does not match has the empty type.

	Examples with r"([a-zA-Z]+)(?:\\([^)]*\\))?!?:":
	'feat(ui): add button' -> 'feat'
	'Revert "feat: add button"' -> ''
	"""
	regex = re.compile(pattern)

	def type_of(message: str) -> str:
		match = regex.match(message.strip())
		if not match:
			return ""
		return (match.group(1) if regex.groups else match.group(0)).lower()

	return type_of


def classify(commit: RawCommit, rule: ClassificationRule) -> ClassifiedCommit | None:
	"""Return the commit with its group, or None if no group claims its type."""
	type_name = rule.type_of(commit.message)
	group = rule.group_for(type_name)
	if not group:
		return None

	return ClassifiedCommit(
		group=group,
		sha=commit.sha,
		message=commit.message,
		author=commit.author_name,
		type=type_name,
	)


def classify_all(commits: list[RawCommit], rule: ClassificationRule) -> list[ClassifiedCommit]:
	classified = (classify(commit, rule) for commit in commits)
	return [commit for commit in classified if commit]
