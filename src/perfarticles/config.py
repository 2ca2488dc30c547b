"""Configuration loading from YAML with environment overrides."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from perfarticles.extraction import DEFAULT_CATEGORY
from perfarticles.publishing import DEFAULT_EXTRA_TAGS

logger = logging.getLogger(__name__)

# Default config path relative to the project root
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "perfarticles.yaml"

CONFIG_ENV = "PERFARTICLES_CONFIG"
ENV_OVERRIDES = {
    "PERFARTICLES_SOURCE": "source_document",
    "PERFARTICLES_ARTICLES_DIR": "articles_dir",
}


@dataclass(frozen=True)
class Settings:
    """Settings for converting and preparing articles.

    Relative paths are resolved against the invocation directory.
    """
    source_document: Path = Path("README.md")
    output_prefix: str = "ghost-article-"
    default_category: str = DEFAULT_CATEGORY
    extra_tags: tuple[str, ...] = DEFAULT_EXTRA_TAGS
    articles_dir: Path = Path("articles")


def _read_yaml(path: Path) -> dict:
    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def _string_value(values: dict, key: str, default: str) -> str:
    """Get a string setting, rejecting nulls, lists and mappings."""
    value = values.get(key, default)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {value!r}")
    return value


def load_config(config_path: Path | None = None) -> Settings:
    """Load settings from a YAML file and the environment.

    The file is config_path if given, else $PERFARTICLES_CONFIG, else
    config/perfarticles.yaml. A missing default file yields the built-in
    defaults; a missing file that was asked for explicitly is an error.
    Environment variables override values from the file.

    Args:
        config_path: Optional path to a config file

    Returns:
        Settings instance

    Raises:
        FileNotFoundError: If an explicitly requested config file is missing
        ValueError: If the config file does not hold a mapping or has bad values
    """
    explicit = config_path or os.environ.get(CONFIG_ENV)
    path = Path(explicit) if explicit else DEFAULT_CONFIG_PATH

    if path.exists():
        data = _read_yaml(path)
    elif explicit:
        raise FileNotFoundError(f"Config file not found: {path}")
    else:
        data = {}

    known = set(Settings.__dataclass_fields__)
    for key in sorted(set(data) - known):
        logger.warning("Ignoring unknown config key %r in %s", key, path)

    for env_var, key in ENV_OVERRIDES.items():
        if os.environ.get(env_var):
            data[key] = os.environ[env_var]

    values = {key: value for key, value in data.items() if key in known}

    extra_tags = values.get("extra_tags", DEFAULT_EXTRA_TAGS)
    if not isinstance(extra_tags, (list, tuple)) or not all(isinstance(tag, str) for tag in extra_tags):
        raise ValueError(f"extra_tags must be a list of strings, got {extra_tags!r}")

    return Settings(
        source_document=Path(_string_value(values, "source_document", str(Settings.source_document))),
        output_prefix=str(values.get("output_prefix", Settings.output_prefix) or ""),
        default_category=_string_value(values, "default_category", DEFAULT_CATEGORY),
        extra_tags=tuple(extra_tags),
        articles_dir=Path(_string_value(values, "articles_dir", str(Settings.articles_dir))),
    )
