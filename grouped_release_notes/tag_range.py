from .core.errors import NotFoundError
from .models import Tag, TagRange


def select_range(tags: list[Tag], requested_tag_name: str | None = None) -> TagRange:
	"""Select the tags that bound a release.

	`tags` must be ordered newest first. Without a requested tag the two latest
	tags are used. `base` is None when `compare` is the oldest tag, which is the
	initial release of the repository.
	"""
	if requested_tag_name:
		return _select_by_name(tags, requested_tag_name)

	return _select_latest(tags)


def _select_latest(tags: list[Tag]) -> TagRange:
	if not tags:
		raise NotFoundError("Could not find latest tag. No tags in GitHub")

	return TagRange(compare=tags[0], base=tags[1] if len(tags) > 1 else None)


def _select_by_name(tags: list[Tag], name: str) -> TagRange:
	for index, tag in enumerate(tags):
		if tag.name == name:
			base = tags[index + 1] if index + 1 < len(tags) else None
			return TagRange(compare=tag, base=base)

	raise NotFoundError(f"Could not find {name} in tag list")
