from dataclasses import dataclass


@dataclass(frozen=True)
class Tag:
	name: str
	sha: str | None = None

	@classmethod
	def from_dict(cls, data: dict) -> "Tag":
		return cls(
			name=data["name"],
			sha=(data.get("commit") or {}).get("sha"),
		)


@dataclass(frozen=True)
class TagRange:
	"""Commit window of a release, from `base` (exclusive) to `compare`."""

	compare: Tag
	base: Tag | None = None

	@property
	def is_initial_release(self) -> bool:
		return self.base is None
