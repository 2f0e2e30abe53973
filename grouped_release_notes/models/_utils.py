SHORT_SHA_LENGTH = 7


def get_title(message: str) -> str:
	"""Return the first line of a commit message."""
	return message.split("\n", 1)[0] if message else ""


def short_sha(sha: str) -> str:
	return sha[:SHORT_SHA_LENGTH]


def capitalize(text: str) -> str:
	"""Uppercase the first character and lowercase the rest.

	Examples:
	'feat: A New Feature' -> 'Feat: a new feature'
	'PERF' -> 'Perf'
	"""
	if not text:
		return ""
	return text[0].upper() + text[1:].lower()


def default_type_of(message: str) -> str:
	"""Return the text before the first colon, lowercased.

	Examples:
	'feat: a new feature' -> 'feat'
	'Fix(api): handle timeouts' -> 'fix(api)'
	'Update readme' -> 'update readme'
	"""
	return message.split(":", 1)[0].lower()
