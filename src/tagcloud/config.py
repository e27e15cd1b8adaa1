"""Configuration for tag cloud generation."""

import codecs
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .core.scale import MAX_FONT_SIZE, MIN_FONT_SIZE
from .core.separators import DEFAULT_SEPARATORS, SeparatorSet
from .render import DEFAULT_STYLESHEET

# Cache directory name for downloaded inputs
URL_CACHE_DIR_NAME = ".tagcloud-cache"


def _setting(data: dict[str, Any], key: str, default: str) -> str:
    """Read a string setting, treating a missing or null value as the default."""
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValueError(f"Config '{key}' must be a string, got {type(value).__name__}")
    return value


@dataclass
class CloudConfig:
    """Settings shared by the CLI and the preview server."""

    separators: str = DEFAULT_SEPARATORS
    encoding: str = "utf-8"
    stylesheet: str = DEFAULT_STYLESHEET
    min_font: int = MIN_FONT_SIZE
    max_font: int = MAX_FONT_SIZE
    base_dir: Path = field(default_factory=Path.cwd)
    cache_dir: Path | None = None

    def __post_init__(self) -> None:
        """Validate settings after init."""
        for name in ("separators", "encoding", "stylesheet"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"Config '{name}' must be a string")
        if not self.separators:
            raise ValueError("Config 'separators' must not be empty")
        if self.min_font > self.max_font:
            raise ValueError(
                f"Config font range is inverted: min {self.min_font} > max {self.max_font}"
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Config 'encoding' is unknown: {self.encoding}") from None

    @classmethod
    def from_dict(cls, data: dict[str, Any], base_dir: Path | None = None) -> "CloudConfig":
        """Create CloudConfig from YAML dict."""
        font = data.get("font", {}) or {}
        if not isinstance(font, dict):
            raise ValueError("Config 'font' must be a mapping with 'min' and 'max'")

        cache_dir = data.get("cache_dir")
        return cls(
            separators=_setting(data, "separators", DEFAULT_SEPARATORS),
            encoding=_setting(data, "encoding", "utf-8"),
            stylesheet=_setting(data, "stylesheet", DEFAULT_STYLESHEET),
            min_font=int(font.get("min", MIN_FONT_SIZE)),
            max_font=int(font.get("max", MAX_FONT_SIZE)),
            base_dir=base_dir or Path.cwd(),
            cache_dir=Path(cache_dir) if cache_dir else None,
        )

    @classmethod
    def from_yaml(cls, path: Path) -> "CloudConfig":
        """Load configuration from a YAML file.

        Relative paths in the file are resolved against the directory
        containing it.
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")

        return cls.from_dict(data, base_dir=path.parent.resolve())

    @property
    def font_range(self) -> tuple[int, int]:
        """Smallest and largest font class."""
        return (self.min_font, self.max_font)

    def separator_set(self) -> SeparatorSet:
        """Build the separator set described by this config."""
        return SeparatorSet.from_string(self.separators)

    def get_cache_dir(self) -> Path:
        """Get the directory where downloaded inputs are cached."""
        path = self.cache_dir or Path(URL_CACHE_DIR_NAME)
        if not path.is_absolute():
            path = self.base_dir / path
        return path

    def override(self, **values: Any) -> None:
        """Override settings, ignoring values that are None."""
        for key, value in values.items():
            if value is None:
                continue
            if not hasattr(self, key):
                raise KeyError(f"Unknown config setting: {key}")
            setattr(self, key, value)
        self.__post_init__()
