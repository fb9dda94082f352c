"""Configuration loading."""

import os
from pathlib import Path

import yaml
from rich.console import Console

console = Console()

DEFAULT_CONFIG_PATH = Path("config/config.yaml")

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "GITHUB_TOKEN": ("github", "token"),
    "GITLAB_TOKEN": ("gitlab", "token"),
    "DEFAULT_BRANCH": ("defaults", "branch"),
}


def load_config(config_path: Path | None = None) -> dict:
    """Load configuration from YAML file and apply environment overrides.

    Without an explicit path a missing default file just means an empty
    config. An explicitly requested file must exist.
    """
    path = config_path or DEFAULT_CONFIG_PATH
    if path.exists():
        config = yaml.safe_load(path.read_text()) or {}
    elif config_path is not None:
        console.print(f"[red]Error:[/red] Config file not found: {path}")
        raise SystemExit(1)
    else:
        config = {}

    for env_var, (section, key) in ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            config.setdefault(section, {})[key] = value

    return config


def get_platform(config: dict) -> str:
    """Detect which platform is configured."""
    if "local" in config:
        return "local"
    if "github" in config:
        return "github"
    if "gitlab" in config:
        return "gitlab"
    return "local"


def default_branch(config: dict) -> str:
    return config.get("defaults", {}).get("branch", "main")


def stack_trace_settings(config: dict) -> tuple[str, list[str]]:
    """Source root and application package prefixes for stack trace frames."""
    section = config.get("stack_trace", {})
    return (
        section.get("source_root", "src/main/java"),
        section.get("package_prefixes") or [],
    )
