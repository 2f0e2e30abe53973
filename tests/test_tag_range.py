"""Tests for selecting the tags that bound a release."""

import pytest

from grouped_release_notes.core.errors import NotFoundError
from grouped_release_notes.models import Tag
from grouped_release_notes.tag_range import select_range


@pytest.fixture
def tags():
	return [Tag(name="4th"), Tag(name="3rd"), Tag(name="2nd"), Tag(name="1st")]


class TestLatestTags:
	"""Test selection without a requested tag."""

	def test_two_latest_tags(self, tags):
		tag_range = select_range(tags)
		assert tag_range.compare.name == "4th"
		assert tag_range.base.name == "3rd"
		assert tag_range.is_initial_release is False

	def test_single_tag_has_no_base(self):
		tag_range = select_range([Tag(name="1st")])
		assert tag_range.compare.name == "1st"
		assert tag_range.base is None
		assert tag_range.is_initial_release is True

	def test_no_tags_raises_error(self):
		with pytest.raises(NotFoundError, match="No tags"):
			select_range([])

	def test_empty_requested_name_uses_latest(self, tags):
		assert select_range(tags, "").compare.name == "4th"


class TestRequestedTag:
	"""Test selection of a tag passed with --tag."""

	def test_tag_in_the_middle(self, tags):
		tag_range = select_range(tags, "3rd")
		assert tag_range.compare.name == "3rd"
		assert tag_range.base.name == "2nd"

	def test_latest_tag(self, tags):
		tag_range = select_range(tags, "4th")
		assert tag_range.compare.name == "4th"
		assert tag_range.base.name == "3rd"

	def test_oldest_tag_is_initial_release(self, tags):
		tag_range = select_range(tags, "1st")
		assert tag_range.compare.name == "1st"
		assert tag_range.base is None

	def test_unknown_tag_raises_error(self, tags):
		with pytest.raises(NotFoundError, match="v0.0.0"):
			select_range(tags, "v0.0.0")

	def test_not_found_is_a_lookup_error(self, tags):
		with pytest.raises(LookupError):
			select_range(tags, "v0.0.0")

	def test_keeps_tag_metadata(self):
		tags = [Tag(name="v2", sha="bbb"), Tag(name="v1", sha="aaa")]
		tag_range = select_range(tags, "v2")
		assert tag_range.compare == Tag(name="v2", sha="bbb")
		assert tag_range.base == Tag(name="v1", sha="aaa")
