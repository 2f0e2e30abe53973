from dataclasses import dataclass

from ._utils import get_title, short_sha


@dataclass(frozen=True)
class RawCommit:
	sha: str
	message: str
	author_name: str = ""

	@property
	def title(self) -> str:
		return get_title(self.message)

	@classmethod
	def from_dict(cls, data: dict) -> "RawCommit":
		"""Build a commit from an item of the GitHub commits or compare API."""
		commit = data.get("commit") or {}
		author = commit.get("author") or {}
		return cls(
			sha=data["sha"],
			message=commit.get("message", ""),
			author_name=author.get("name", ""),
		)


@dataclass(frozen=True)
class CommitDetail:
	sha: str
	date: str  # ISO-8601 author date

	@classmethod
	def from_dict(cls, data: dict) -> "CommitDetail":
		return cls(
			sha=data["sha"],
			date=data["commit"]["author"]["date"],
		)


@dataclass(frozen=True)
class ClassifiedCommit:
	group: str
	sha: str
	message: str
	author: str = ""
	type: str = ""

	@property
	def short_sha(self) -> str:
		return short_sha(self.sha)

	@property
	def title(self) -> str:
		return get_title(self.message)
