import os
import tomllib
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import dotenv_values

from .config import DEFAULT_API_URL, GitHubConfig, GroupingConfig, ReleaseNotesConfig
from .errors import ConfigurationError

ENV_TOKEN = "GH_TOKEN"
ENV_REPOSITORY = "GH_REPOSITORY"
ENV_API_URL = "GH_API_URL"

PYPROJECT_URL_KEYS = ("Repository", "repository", "Source", "source")


class ConfigLoader(ABC):
	@abstractmethod
	def load(self) -> ReleaseNotesConfig:
		"""Load configuration from source."""
		pass


def _build_grouping(values: Mapping[str, Any]) -> GroupingConfig:
	kwargs = {}
	if "group_by" in values:
		kwargs["group_by"] = dict(values["group_by"])
	for key in ("type_pattern", "type_of", "commit_template"):
		if values.get(key):
			kwargs[key] = values[key]

	return GroupingConfig(**kwargs)


class DictConfigLoader(ConfigLoader):
	"""Load from dictionary (for programmatic usage)."""

	def __init__(self, config_dict: dict[str, Any]):
		self.config_dict = config_dict

	def load(self) -> ReleaseNotesConfig:
		return ReleaseNotesConfig(
			github=GitHubConfig(
				token=self.config_dict.get("github_token", ""),
				repository_url=self.config_dict.get("repository_url", ""),
				api_url=self.config_dict.get("api_url") or DEFAULT_API_URL,
			),
			grouping=_build_grouping(self.config_dict),
			downloads=self.config_dict.get("downloads"),
			downloads_heading=self.config_dict.get("downloads_heading", "Downloads"),
		)


class EnvConfigLoader(ConfigLoader):
	"""Load from .env file."""

	def __init__(self, env_path: str = ".env"):
		self.env_path = env_path

	def load(self) -> ReleaseNotesConfig:
		config = dotenv_values(self.env_path)

		return ReleaseNotesConfig(
			github=GitHubConfig(
				token=config.get(ENV_TOKEN) or "",
				repository_url=config.get(ENV_REPOSITORY) or "",
				api_url=config.get(ENV_API_URL) or DEFAULT_API_URL,
			),
		)


class TomlConfigLoader(ConfigLoader):
	"""Load from TOML file (default config format).

	Without an explicit path, `release-notes.toml` in the working directory is
	used, then DEFAULT_CONFIG_PATH. If neither exists the defaults apply and the
	token and repository must come from the environment or `pyproject.toml`.
	"""

	LOCAL_CONFIG_NAME = "release-notes.toml"
	DEFAULT_CONFIG_PATH = Path.home() / ".grouped-release-notes" / "config.toml"

	def __init__(
		self,
		config_path: Path | str | None = None,
		environ: Mapping[str, str] | None = None,
		cwd: Path | str | None = None,
	):
		"""Initialize TOML config loader.

		Args:
			config_path: Path to config file. If None, the default locations are searched.
			environ: Environment overriding the file. Defaults to os.environ.
			cwd: Directory holding `release-notes.toml` and `pyproject.toml`.
		"""
		self.config_path = Path(config_path) if config_path is not None else None
		self.environ = os.environ if environ is None else environ
		self.cwd = Path(cwd) if cwd is not None else Path.cwd()

	def find_config_path(self) -> Path | None:
		if self.config_path is not None:
			if not self.config_path.exists():
				raise ConfigurationError(f"Config file not found at {self.config_path}")
			return self.config_path

		for path in (self.cwd / self.LOCAL_CONFIG_NAME, self.DEFAULT_CONFIG_PATH):
			if path.is_file():
				return path

		return None

	def load(self) -> ReleaseNotesConfig:
		"""Load configuration from TOML file and environment.

		Raises:
			ConfigurationError: If the file is invalid or required fields are missing
		"""
		path = self.find_config_path()
		config = _read_toml(path) if path else {}

		github_config = config.get("github", {})
		grouping_config = config.get("grouping", {})

		token = self.environ.get(ENV_TOKEN) or github_config.get("token", "")
		api_url = self.environ.get(ENV_API_URL) or github_config.get("api_url") or DEFAULT_API_URL
		repository_url = (
			self.environ.get(ENV_REPOSITORY)
			or github_config.get("repository")
			or self._get_pyproject_repository_url()
		)

		return ReleaseNotesConfig(
			github=GitHubConfig(
				token=token,
				repository_url=repository_url or "",
				api_url=api_url,
			),
			grouping=_build_grouping(grouping_config),
			downloads=config.get("downloads") or None,
			downloads_heading=config.get("downloads_heading", "Downloads"),
		)

	def _get_pyproject_repository_url(self) -> str | None:
		pyproject = self.cwd / "pyproject.toml"
		if not pyproject.is_file():
			return None

		urls = _read_toml(pyproject).get("project", {}).get("urls", {})
		for key in PYPROJECT_URL_KEYS:
			if urls.get(key):
				return urls[key]

		return None


def _read_toml(path: Path) -> dict[str, Any]:
	try:
		with open(path, "rb") as f:
			return tomllib.load(f)
	except (OSError, tomllib.TOMLDecodeError) as e:
		raise ConfigurationError(f"Could not read config file {path}: {e}") from e
