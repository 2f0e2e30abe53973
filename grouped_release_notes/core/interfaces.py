from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Protocol

from ..models import CommitDetail, RawCommit, Tag


@dataclass
class ProgressEvent:
	type: str  # "info", "success", "error", "commit", "release_notes"
	message: str
	metadata: dict[str, Any] | None = None


class ProgressReporter(ABC):
	@abstractmethod
	def report(self, event: ProgressEvent) -> None:
		"""Report a progress event."""
		pass


class NullProgressReporter(ProgressReporter):
	"""No-op reporter for library usage."""

	def report(self, event: ProgressEvent) -> None:
		pass


class CompositeProgressReporter(ProgressReporter):
	"""Combine multiple reporters."""

	def __init__(self, reporters: list[ProgressReporter]):
		self.reporters = reporters

	def report(self, event: ProgressEvent) -> None:
		for reporter in self.reporters:
			reporter.report(event)


class TagSource(Protocol):
	def list_tags(self) -> list[Tag]:
		"""Return all tags, newest first."""
		...


class CommitSource(Protocol):
	def get_commit(self, ref: str) -> CommitDetail:
		"""Resolve a ref (tag, branch or sha) to its commit."""
		...

	def list_commits_until(self, date: str) -> list[RawCommit]:
		"""Return the commits authored up to `date`."""
		...

	def list_commits_between(self, base: str, compare: str) -> list[RawCommit]:
		"""Return the commits reachable from `compare` but not from `base`."""
		...


class ReleasePublisher(Protocol):
	def publish(self, tag_name: str, title: str, body: str) -> None:
		"""Create a release for `tag_name`."""
		...
