"""Interactive setup command for creating/updating configuration."""

import json
import tomllib
from pathlib import Path

from rich.console import Console
from rich.prompt import Confirm, Prompt

from .classifier import DEFAULT_GROUP_BY
from .core.config import DEFAULT_API_URL
from .core.config_loader import TomlConfigLoader
from .core.errors import ConfigurationError

console = Console()


def setup_config(config_path: Path | None = None) -> None:
	"""Interactive setup to create or update configuration file.

	Args:
		config_path: Path to config file. If None, uses ./release-notes.toml.
	"""
	if config_path is None:
		config_path = Path.cwd() / TomlConfigLoader.LOCAL_CONFIG_NAME

	config_exists = config_path.exists()
	if config_exists:
		console.print(f"\n[yellow]Configuration file already exists at:[/yellow] {config_path}")
		if not Confirm.ask("Do you want to update it?", default=False):
			console.print("[dim]Setup cancelled.[/dim]")
			return
		console.print()

	existing_values = {}
	if config_exists:
		try:
			with open(config_path, "rb") as f:
				existing_values = _flatten_toml(tomllib.load(f))
			console.print("[green]✓[/green] Loaded existing values from TOML config")
		except (OSError, tomllib.TOMLDecodeError) as e:
			console.print(f"[yellow]Warning: Could not read existing config: {e}[/yellow]")

	if existing_values:
		console.print("[dim]Existing values will be shown as defaults (press Enter to keep them)[/dim]\n")

	console.print("[bold cyan]GitHub Configuration[/bold cyan]")
	github_token = Prompt.ask(
		"GitHub Personal Access Token (leave empty to use GH_TOKEN)",
		default=existing_values.get("github_token", ""),
		password=True,
	)
	repository = Prompt.ask(
		"Repository URL (e.g. https://github.com/owner/name.git)",
		default=existing_values.get("repository", ""),
	)
	api_url = Prompt.ask(
		"GitHub API URL",
		default=existing_values.get("api_url") or DEFAULT_API_URL,
	)

	console.print("\n[bold cyan]Groups[/bold cyan]")
	console.print("[dim]Format: Heading=type,type; Heading=type (order is kept in the notes)[/dim]")
	while True:
		groups = Prompt.ask(
			"Groups",
			default=existing_values.get("groups") or _format_groups(DEFAULT_GROUP_BY),
		)
		try:
			group_by = _parse_groups(groups)
			break
		except ConfigurationError as e:
			console.print(f"[red]{e}[/red]")

	toml_content = _build_toml_content(
		github_token=github_token,
		repository=repository,
		api_url=api_url,
		group_by=group_by,
	)

	console.print(f"\n[bold]Configuration will be written to:[/bold] {config_path}")
	console.print("\n[dim]Preview:[/dim]")
	console.print("[dim]" + "─" * 60 + "[/dim]")
	preview = toml_content.replace(github_token, "ghp_***") if github_token else toml_content
	# Escape opening square brackets for Rich markup (closing brackets are fine)
	preview = preview.replace("[", r"\[")
	console.print(preview)
	console.print("[dim]" + "─" * 60 + "[/dim]\n")

	if not Confirm.ask("Write this configuration?", default=True):
		console.print("[dim]Setup cancelled.[/dim]")
		return

	config_path.parent.mkdir(parents=True, exist_ok=True)
	config_path.write_text(toml_content)
	console.print(f"\n[green]✓ Configuration saved to {config_path}[/green]")


def _flatten_toml(toml_config: dict) -> dict:
	"""Flatten nested TOML config to simple dict for defaults."""
	flat = {}

	github = toml_config.get("github", {})
	flat["github_token"] = github.get("token", "")
	flat["repository"] = github.get("repository", "")
	flat["api_url"] = github.get("api_url", "")

	group_by = toml_config.get("grouping", {}).get("group_by")
	flat["groups"] = _format_groups(group_by) if group_by else ""

	return flat


def _format_groups(group_by: dict) -> str:
	"""Examples:
	{'Features': ['feat'], 'Enhancement': ['refactor', 'perf']} -> 'Features=feat; Enhancement=refactor,perf'
	"""
	return "; ".join(f"{group}={','.join(types)}" for group, types in group_by.items())


def _parse_groups(value: str) -> dict[str, list[str]]:
	group_by = {}
	for item in value.split(";"):
		if not item.strip():
			continue
		group, sep, types = item.partition("=")
		type_list = [t.strip() for t in types.split(",") if t.strip()]
		if not sep or not group.strip() or not type_list:
			raise ConfigurationError(f"Invalid group definition: {item.strip()!r}")
		group_by[group.strip()] = type_list

	if not group_by:
		raise ConfigurationError("At least one group is required")

	return group_by


def _toml_string(value: str) -> str:
	return json.dumps(value, ensure_ascii=False)


def _build_toml_content(
	github_token: str,
	repository: str,
	api_url: str,
	group_by: dict[str, list[str]],
) -> str:
	"""Build TOML file content from values."""
	groups = "\n".join(
		f"{_toml_string(group)} = [{', '.join(_toml_string(t) for t in types)}]" for group, types in group_by.items()
	)
	token_line = f"token = {_toml_string(github_token)}" if github_token else '# token = "" (read from GH_TOKEN)'

	return f"""# Grouped Release Notes Configuration
# Generated by: grouped-release-notes setup

# Heading of the download links section
# downloads_heading = "Downloads"

[github]
{token_line}
repository = {_toml_string(repository)}
api_url = {_toml_string(api_url)}

[grouping]
# Regular expression whose first group is the commit type (default: text before the first colon)
# type_pattern = "([a-zA-Z]+)(?:\\\\([^)]*\\\\))?!?:"
# Commit line, fields: sha, short_sha, title, capitalized_title, type, capitalized_type, author, group
# commit_template = "* {{short_sha}} {{capitalized_title}}"

[grouping.group_by]
{groups}

# [downloads]
# "package.tar.gz" = "https://example.com/{{version}}/package.tar.gz"
"""
