import re
from dataclasses import dataclass

# .../owner/name.git, with or without the ".git" suffix
REPOSITORY_URL = re.compile(r"/([\w-]+)/([\w.-]+?)(?:\.git)?/?$")


@dataclass(frozen=True)
class Repository:
	owner: str
	name: str

	@property
	def full_name(self) -> str:
		return f"{self.owner}/{self.name}"

	@classmethod
	def from_url(cls, url: str) -> "Repository | None":
		"""Parse owner and name from a repository URL.

		Examples:
		'https://github.com/nhn/tui.grid.git' -> Repository('nhn', 'tui.grid')
		'git@github.com:owner/repo.git' -> None (no slash before the owner)
		"""
		match = REPOSITORY_URL.search(url or "")
		if not match:
			return None
		return cls(owner=match.group(1), name=match.group(2))
