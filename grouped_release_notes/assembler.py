from typing import Callable

from .models import ClassifiedCommit, LinkSection, ReleaseNote, Section
from .models._utils import capitalize

CommitTemplate = Callable[[ClassifiedCommit], str]


def default_commit_template(commit: ClassifiedCommit) -> str:
	"""Render a commit as `* <short sha> <Capitalized title>`.

	Example:
	'feat: A New feature' (sha 91dccdf...) -> '* 91dccdf Feat: a new feature'
	"""
	return f"* {commit.short_sha} {capitalize(commit.title)}"


def format_commit_template(pattern: str) -> CommitTemplate:
	"""Build a commit template from a `str.format` pattern.

	Available fields: sha, short_sha, title, capitalized_title, type,
	capitalized_type, author, group.
	"""

	def template(commit: ClassifiedCommit) -> str:
		return pattern.format(
			sha=commit.sha,
			short_sha=commit.short_sha,
			title=commit.title,
			capitalized_title=capitalize(commit.title),
			type=commit.type,
			capitalized_type=capitalize(commit.type),
			author=commit.author,
			group=commit.group,
		)

	return template


def build_release_note(
	classified: list[ClassifiedCommit],
	group_order: list[str],
	extra_sections: list[LinkSection] | None = None,
	template: CommitTemplate | None = None,
) -> ReleaseNote:
	template = template or default_commit_template

	grouped: dict[str, list[ClassifiedCommit]] = {group: [] for group in group_order}
	for commit in classified:
		if commit.group not in grouped:
			raise ValueError(f"Commit {commit.short_sha} has undeclared group {commit.group!r}")
		grouped[commit.group].append(commit)

	note = ReleaseNote()
	for group, commits in grouped.items():
		if not commits:
			continue
		body = "".join(f"{template(commit)}\n" for commit in commits)
		note.sections.append(Section(heading=group, body=body))

	for extra in extra_sections or []:
		if extra.links:
			note.sections.append(extra.to_section())

	return note


def assemble(
	classified: list[ClassifiedCommit],
	group_order: list[str],
	extra_sections: list[LinkSection] | None = None,
	template: CommitTemplate | None = None,
) -> str:
	"""Render the grouped release note.

	Sections follow `group_order` and empty groups are left out. Commits keep
	their relative order inside a group. `extra_sections` come last.
	"""
	return str(build_release_note(classified, group_order, extra_sections, template))
