"""Tests for the interactive setup command."""

import tomllib

import pytest

from grouped_release_notes.classifier import DEFAULT_GROUP_BY
from grouped_release_notes.core.errors import ConfigurationError
from grouped_release_notes.setup_command import (
	_build_toml_content,
	_flatten_toml,
	_format_groups,
	_parse_groups,
)


class TestHelperFunctions:
	"""Test helper functions for setup command."""

	def test_flatten_toml(self):
		toml_config = {
			"github": {
				"token": "ghp_test",
				"repository": "https://github.com/nhn/tui.grid.git",
				"api_url": "https://api.github.com",
			},
			"grouping": {"group_by": {"Features": ["feat"], "Enhancement": ["refactor", "perf"]}},
		}

		result = _flatten_toml(toml_config)

		assert result["github_token"] == "ghp_test"
		assert result["repository"] == "https://github.com/nhn/tui.grid.git"
		assert result["api_url"] == "https://api.github.com"
		assert result["groups"] == "Features=feat; Enhancement=refactor,perf"

	def test_flatten_toml_with_missing_sections(self):
		result = _flatten_toml({})

		assert result["github_token"] == ""
		assert result["repository"] == ""
		assert result["groups"] == ""

	def test_format_default_groups(self):
		assert _format_groups(DEFAULT_GROUP_BY) == (
			"Features=feat; Bug Fixes=fix; Enhancement=refactor,perf; Documentation=docs"
		)

	def test_parse_groups(self):
		assert _parse_groups("Features=feat; Bug Fixes = fix ; Enhancement=refactor, perf;") == {
			"Features": ["feat"],
			"Bug Fixes": ["fix"],
			"Enhancement": ["refactor", "perf"],
		}

	def test_parse_groups_round_trip_keeps_order(self):
		value = "Zeta=z; Alpha=a"
		assert _format_groups(_parse_groups(value)) == value

	@pytest.mark.parametrize("value", ["", "Features", "Features=", "=feat"])
	def test_parse_invalid_groups(self, value):
		with pytest.raises(ConfigurationError):
			_parse_groups(value)


class TestBuildTomlContent:
	def test_content_is_valid_toml(self):
		content = _build_toml_content(
			github_token="ghp_test",
			repository="https://github.com/nhn/tui.grid.git",
			api_url="https://api.github.com",
			group_by={"Features": ["feat"], "Bug Fixes": ["fix"]},
		)

		config = tomllib.loads(content)

		assert config["github"] == {
			"token": "ghp_test",
			"repository": "https://github.com/nhn/tui.grid.git",
			"api_url": "https://api.github.com",
		}
		assert list(config["grouping"]["group_by"]) == ["Features", "Bug Fixes"]
		assert config["grouping"]["group_by"]["Bug Fixes"] == ["fix"]

	def test_empty_token_is_left_out(self):
		content = _build_toml_content(
			github_token="",
			repository="https://github.com/nhn/tui.grid.git",
			api_url="https://api.github.com",
			group_by={"Features": ["feat"]},
		)

		assert "token" not in tomllib.loads(content)["github"]
