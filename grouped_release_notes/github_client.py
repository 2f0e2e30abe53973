import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util import Retry

from .core.config import DEFAULT_API_URL
from .core.errors import ConnectionFailedError, RemoteError
from .models import CommitDetail, RawCommit, Repository, Tag

logger = logging.getLogger(__name__)

PER_PAGE = 100


class GitHubClient:
	"""Client to interact with the GitHub API.

	Implements the tag source, commit source and release publisher used by the
	generator. Every non-2xx response raises a RemoteError.
	"""

	def __init__(self, token: str, repository: Repository, api_url: str = DEFAULT_API_URL):
		self.repository = repository
		self.api_url = api_url.rstrip("/")
		self.session = requests.Session()
		self.session.headers.update(
			{
				"Authorization": f"Bearer {token}",
				"Accept": "application/vnd.github+json",
			}
		)
		retries = Retry(
			total=3,
			backoff_factor=0.1,
			status_forcelist=[500, 502, 503, 504],
			allowed_methods=None,
			raise_on_status=False,
		)
		self.session.mount("https://", HTTPAdapter(max_retries=retries))

	@property
	def url(self) -> str:
		return f"{self.api_url}/repos/{self.repository.owner}/{self.repository.name}"

	def list_tags(self) -> list[Tag]:
		"""Return all tags of the repository, newest first."""
		return [Tag.from_dict(tag) for tag in self._get_paginated(f"{self.url}/tags")]

	def get_commit(self, ref: str) -> CommitDetail:
		"""Return the commit a tag, branch or sha points to."""
		r = self._request("GET", f"{self.url}/commits/{ref}")
		return CommitDetail.from_dict(r.json())

	def list_commits_until(self, date: str) -> list[RawCommit]:
		"""Return the commits of the default branch authored up to `date`.

		Use this for a tag that has no previous tag. Else, use list_commits_between.
		"""
		commits = self._get_paginated(f"{self.url}/commits", params={"until": date})
		return [RawCommit.from_dict(commit) for commit in commits]

	def list_commits_between(self, base: str, compare: str) -> list[RawCommit]:
		"""Return a list of commits between two tags.

		Use this for a tag that has a previous tag. Else, use list_commits_until.
		"""
		commits = self._get_paginated(f"{self.url}/compare/{base}...{compare}", items_key="commits")
		return [RawCommit.from_dict(commit) for commit in commits]

	def publish(self, tag_name: str, title: str, body: str) -> None:
		"""Create a release for an existing tag."""
		self._request(
			"POST",
			f"{self.url}/releases",
			json={
				"tag_name": tag_name,
				"name": title,
				"body": body,
			},
		)

	def _get_paginated(self, url: str, params: dict | None = None, items_key: str | None = None) -> list[dict]:
		"""Collect every page of a list endpoint by following the `next` links.

		`items_key` names the list inside an object payload, e.g. "commits" for compare.
		"""
		items = []
		next_url: str | None = url
		next_params: dict | None = {**(params or {}), "per_page": PER_PAGE}
		while next_url:
			r = self._request("GET", next_url, params=next_params)
			data = r.json()
			items.extend(data.get(items_key, []) if items_key else data)
			next_url = r.links.get("next", {}).get("url")
			# the next link already carries the query string
			next_params = None

		return items

	def _request(self, method: str, url: str, **kwargs) -> requests.Response:
		logger.debug("%s %s", method, url)
		try:
			r = self.session.request(method, url, **kwargs)
		except requests.RequestException as e:
			raise ConnectionFailedError(method, url, e) from e
		if not r.ok:
			raise RemoteError.from_response(r)

		return r
