from typing import TYPE_CHECKING

if TYPE_CHECKING:
	import requests


class ReleaseNotesError(Exception):
	"""Base class for every error that aborts a release notes run."""


class ConfigurationError(ReleaseNotesError, ValueError):
	"""Missing or invalid repository URL, token or config file."""


class NotFoundError(ReleaseNotesError, LookupError):
	"""A requested tag does not exist, or the repository has no tags."""


class RemoteError(ReleaseNotesError):
	"""The hosting API answered with a non-success status."""

	def __init__(self, method: str, url: str, status_code: int, reason: str = ""):
		self.method = method
		self.url = url
		self.status_code = status_code
		self.reason = reason
		super().__init__(f"{method} {url} returned {status_code} {reason}".rstrip())

	@classmethod
	def from_response(cls, response: "requests.Response") -> "RemoteError":
		return cls(
			method=response.request.method or "GET",
			url=response.url,
			status_code=response.status_code,
			reason=response.reason or "",
		)


class ConnectionFailedError(ReleaseNotesError):
	"""The hosting API could not be reached (refused connection, DNS failure, timeout)."""

	def __init__(self, method: str, url: str, cause: Exception):
		self.method = method
		self.url = url
		super().__init__(f"{method} {url} failed: {cause}")
