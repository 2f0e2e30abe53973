"""Decide how the commits of a tag range are collected, and collect them."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .models import RawCommit, TagRange

if TYPE_CHECKING:
	from .core.interfaces import CommitSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompareFetchPlan:
	"""Commits between two tags."""

	base: str
	compare: str


@dataclass(frozen=True)
class UntilTagFetchPlan:
	"""Every commit up to and including the tagged one.

	Commit listing filters by date, not by ref: the tag is resolved to its
	commit first and the commit date becomes the `until` filter.
	"""

	tag: str


FetchPlan = CompareFetchPlan | UntilTagFetchPlan


def resolve_window(tag_range: TagRange) -> FetchPlan:
	if tag_range.base is not None:
		return CompareFetchPlan(base=tag_range.base.name, compare=tag_range.compare.name)

	return UntilTagFetchPlan(tag=tag_range.compare.name)


def fetch_commits(plan: FetchPlan, source: "CommitSource") -> list[RawCommit]:
	if isinstance(plan, CompareFetchPlan):
		logger.debug("Listing commits between %s and %s", plan.base, plan.compare)
		return source.list_commits_between(plan.base, plan.compare)

	detail = source.get_commit(plan.tag)
	logger.debug("Listing commits until %s (%s, %s)", plan.tag, detail.sha[:7], detail.date)
	return source.list_commits_until(detail.date)
