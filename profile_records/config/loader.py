"""
YAML configuration loader for profile widgets.

Loads widget definitions from YAML files with:
- Environment variable substitution
- Required field checks
- Per-kind extraction defaults
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
import structlog

from profile_records.core.http_client import DEFAULT_RELAY_URL
from profile_records.core.models import RecordKind
from profile_records.parsers import ExtractionConfig, PublicationExtractionConfig, build_config

logger = structlog.get_logger(__name__)

DEFAULT_CONFIG_FILE = "widgets.yml"


@dataclass
class WidgetConfig:
    """Configuration for one profile widget."""

    widget_id: str
    kind: RecordKind
    profile_url: str

    # Wording used in notices, e.g. "research grants" from "UiTM Expert"
    name: str = ""
    provider: str = ""

    relay_url: str = DEFAULT_RELAY_URL
    timeout: Optional[float] = None  # None keeps the transport default

    extraction: Optional[ExtractionConfig] = None

    def __post_init__(self):
        self.kind = RecordKind(self.kind)
        if self.extraction is None:
            self.extraction = build_config(self.kind)
        if isinstance(self.extraction, PublicationExtractionConfig) and not self.extraction.base_url:
            self.extraction.base_url = self.profile_url

    @classmethod
    def from_dict(cls, data: dict, relay_url: str = DEFAULT_RELAY_URL) -> "WidgetConfig":
        """Create from dictionary (e.g., from YAML)."""
        kind = RecordKind(data["kind"])
        return cls(
            widget_id=data["widget_id"],
            kind=kind,
            profile_url=data["profile_url"],
            name=data.get("name", kind.value),
            provider=data.get("provider", ""),
            relay_url=data.get("relay_url") or relay_url,
            timeout=data.get("timeout"),
            extraction=build_config(kind, data.get("extraction")),
        )


def substitute_env_vars(text: str) -> str:
    """
    Substitute environment variables in text.

    Supports formats:
    - ${VAR_NAME} - required, empty with a warning if missing
    - ${VAR_NAME:-default} - optional with default

    Args:
        text: Text with env var placeholders

    Returns:
        Text with substituted values
    """
    def replace(match):
        var_expr = match.group(1)
        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return os.getenv(var_name, default)
        else:
            value = os.getenv(var_expr)
            if value is None:
                logger.warning("env_var_not_set", var=var_expr)
                return ""
            return value

    return re.sub(r"\$\{([^}]+)\}", replace, text)


class ConfigLoader:
    """
    Configuration loader for profile widgets.

    Loads YAML config files and checks required widget fields.
    """

    def __init__(self, config_dir: Optional[str] = None):
        """
        Initialize config loader.

        Args:
            config_dir: Directory containing config files
                       (defaults to package config directory)
        """
        if config_dir:
            self.config_dir = Path(config_dir)
        else:
            self.config_dir = Path(__file__).parent

    def load_file(self, filename: str) -> dict:
        """
        Load YAML config file.

        Args:
            filename: Config file name (relative to config_dir)

        Returns:
            Parsed config dict
        """
        filepath = self.config_dir / filename

        if not filepath.exists():
            raise FileNotFoundError(f"Config file not found: {filepath}")

        logger.info("loading_config", file=str(filepath))

        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read()

        content = substitute_env_vars(content)

        config = yaml.safe_load(content)

        return config or {}

    def load_widgets(self, filename: str = DEFAULT_CONFIG_FILE) -> list[WidgetConfig]:
        """
        Load widget definitions from YAML.

        Args:
            filename: Widgets config file name

        Returns:
            List of WidgetConfig objects
        """
        config = self.load_file(filename)
        relay_url = config.get("relay_url") or DEFAULT_RELAY_URL

        widgets = []
        for widget_data in config.get("widgets", []):
            widget = self._parse_widget(widget_data, relay_url)
            widgets.append(widget)
            logger.debug("widget_loaded", widget_id=widget.widget_id)

        return widgets

    def _parse_widget(self, data: dict, relay_url: str) -> WidgetConfig:
        """
        Parse widget definition into WidgetConfig.

        Args:
            data: Widget definition dict
            relay_url: Relay endpoint shared by all widgets in the file

        Returns:
            WidgetConfig object

        Raises:
            ValueError: If required fields missing or kind unknown
        """
        required = ["widget_id", "kind", "profile_url"]
        for name in required:
            if name not in data:
                raise ValueError(f"Missing required field: {name}")

        return WidgetConfig.from_dict(data, relay_url=relay_url)


def load_widgets(config_path: Optional[str] = None) -> list[WidgetConfig]:
    """
    Convenience function to load widget configs.

    Args:
        config_path: Optional path to widgets.yml

    Returns:
        List of WidgetConfig objects
    """
    if config_path:
        loader = ConfigLoader(str(Path(config_path).parent))
        return loader.load_widgets(Path(config_path).name)
    return ConfigLoader().load_widgets()


def load_widget(widget_id: str, config_path: Optional[str] = None) -> WidgetConfig:
    """
    Load a single widget config by id.

    Raises:
        KeyError: If no widget with that id is configured
    """
    for widget in load_widgets(config_path):
        if widget.widget_id == widget_id:
            return widget
    raise KeyError(f"Unknown widget: {widget_id}")
