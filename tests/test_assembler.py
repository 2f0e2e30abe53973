"""Tests for rendering the grouped release note."""

import pytest

from grouped_release_notes.assembler import (
	assemble,
	build_release_note,
	default_commit_template,
	format_commit_template,
)
from grouped_release_notes.classifier import ClassificationRule, classify_all
from grouped_release_notes.models import ClassifiedCommit, LinkSection, RawCommit

GROUP_ORDER = ["Features", "Bug Fixes", "Enhancement", "Documentation"]


def make_commit(group: str, sha: str, message: str, type: str = "") -> ClassifiedCommit:
	return ClassifiedCommit(group=group, sha=sha, message=message, author="author", type=type)


class TestCommitTemplate:
	def test_default_template(self):
		commit = make_commit("Features", "91dccdfasdfasdf", "feat: a new feature (ref #31)")
		assert default_commit_template(commit) == "* 91dccdf Feat: a new feature (ref #31)"

	def test_default_template_lowercases_rest_of_title(self):
		commit = make_commit("Bug Fixes", "abcdef0123", "FIX: Handle Empty Input")
		assert default_commit_template(commit) == "* abcdef0 Fix: handle empty input"

	def test_default_template_uses_first_line(self):
		commit = make_commit("Bug Fixes", "abcdef0123", "fix: crash\n\nLong description")
		assert default_commit_template(commit) == "* abcdef0 Fix: crash"

	def test_format_template(self):
		template = format_commit_template("- {capitalized_type}: {title} ({short_sha}, {author})")
		commit = make_commit("Features", "91dccdfasdfasdf", "feat: Login page", type="feat")
		assert template(commit) == "- Feat: feat: Login page (91dccdf, author)"


class TestAssemble:
	"""Test section ordering and rendering."""

	def test_end_to_end_with_default_rule(self):
		commits = [
			RawCommit(sha="91dccdfasdfasdf", message="feat: a new feature (ref #31)"),
			RawCommit(sha="3bebcfdasdfasdf", message="perf: improve the performance"),
		]
		rule = ClassificationRule()
		note = assemble(classify_all(commits, rule), rule.groups)
		assert note == (
			"\n## Features\n\n* 91dccdf Feat: a new feature (ref #31)\n"
			"\n## Enhancement\n\n* 3bebcfd Perf: improve the performance\n"
		)

	def test_declared_order_and_empty_groups_omitted(self):
		classified = [
			make_commit("Enhancement", "3bebcfdasdfasdf", "perf: improve the performance"),
			make_commit("Features", "91dccdfasdfasdf", "feat: a new feature"),
		]
		note = assemble(classified, GROUP_ORDER)
		assert note.index("## Features") < note.index("## Enhancement")
		assert "## Bug Fixes" not in note
		assert "## Documentation" not in note

	def test_commits_keep_relative_order_within_group(self):
		classified = [
			make_commit("Bug Fixes", "2222222", "fix: second"),
			make_commit("Features", "1111111", "feat: first"),
			make_commit("Bug Fixes", "0000000", "fix: third"),
		]
		note = assemble(classified, GROUP_ORDER)
		assert note == (
			"\n## Features\n\n* 1111111 Feat: first\n"
			"\n## Bug Fixes\n\n* 2222222 Fix: second\n* 0000000 Fix: third\n"
		)

	def test_no_commits_gives_empty_note(self):
		assert assemble([], GROUP_ORDER) == ""

	def test_is_deterministic(self):
		classified = [
			make_commit("Documentation", "4444444", "docs: readme"),
			make_commit("Features", "1111111", "feat: first"),
		]
		assert assemble(classified, GROUP_ORDER) == assemble(list(classified), GROUP_ORDER)

	def test_undeclared_group_raises(self):
		classified = [make_commit("Chores", "1234567", "chore: bump")]
		with pytest.raises(ValueError, match="Chores"):
			assemble(classified, GROUP_ORDER)

	def test_custom_template(self):
		classified = [make_commit("Features", "91dccdfasdfasdf", "feat: login", type="feat")]
		note = assemble(classified, GROUP_ORDER, template=lambda commit: f"- {commit.title}")
		assert note == "\n## Features\n\n- feat: login\n"


class TestExtraSections:
	"""Test link sections appended after the groups."""

	def test_downloads_after_groups(self):
		classified = [make_commit("Features", "91dccdfasdfasdf", "feat: login")]
		downloads = LinkSection(
			heading="Downloads",
			links={
				"tui-grid.js": "https://uicdn.toast.com/grid/4.0.0/tui-grid.js",
				"tui-grid.css": "https://uicdn.toast.com/grid/4.0.0/tui-grid.css",
			},
		)
		note = assemble(classified, GROUP_ORDER, extra_sections=[downloads])
		assert note == (
			"\n## Features\n\n* 91dccdf Feat: login\n"
			"\n## Downloads\n\n"
			"* [tui-grid.js](https://uicdn.toast.com/grid/4.0.0/tui-grid.js)\n"
			"* [tui-grid.css](https://uicdn.toast.com/grid/4.0.0/tui-grid.css)\n"
		)

	def test_empty_link_section_is_omitted(self):
		note = assemble([], GROUP_ORDER, extra_sections=[LinkSection(heading="Downloads")])
		assert note == ""

	def test_release_note_headings(self):
		classified = [
			make_commit("Documentation", "4444444", "docs: readme"),
			make_commit("Bug Fixes", "2222222", "fix: crash"),
		]
		note = build_release_note(
			classified,
			GROUP_ORDER,
			extra_sections=[LinkSection(heading="Downloads", links={"a": "https://a"})],
		)
		assert note.headings == ["Bug Fixes", "Documentation", "Downloads"]
