"""Site configuration for the document store.

Settings are read from the site's Jekyll ``_config.yml`` when one exists,
using Jekyll's own key names so an existing site needs no extra file:

- ``markdown_ext`` -- comma-separated extensions treated as posts.
- ``unpublished`` -- also load documents marked ``published: false``.
- ``timezone`` -- IANA zone applied to dates written without an offset.

``posts_dir`` is a poststore addition and defaults to ``_posts``. Unknown
keys are ignored; the file is shared with the site generator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timezone as dt_timezone
from datetime import tzinfo
from pathlib import Path
from typing import Any, Mapping
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from poststore.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "_config.yml"

DEFAULT_MARKDOWN_EXT: tuple[str, ...] = ("markdown", "mkdown", "mkdn", "mkd", "md")


@dataclass(frozen=True)
class StoreConfig:
    """Immutable loader settings.

    Attributes:
        posts_dir: Directory under the site root holding post files.
        markdown_ext: File extensions (without the dot) loaded as posts.
        unpublished: Load documents whose front matter says
            ``published: false``.
        timezone: IANA zone name used for naive front-matter dates.
    """

    posts_dir: str = "_posts"
    markdown_ext: tuple[str, ...] = DEFAULT_MARKDOWN_EXT
    unpublished: bool = False
    timezone: str = "UTC"

    @property
    def tz(self) -> tzinfo:
        """Resolve ``timezone`` to a ``tzinfo``.

        Raises:
            ConfigError: If the zone name is unknown.
        """
        if self.timezone.upper() in ("UTC", "Z"):
            return dt_timezone.utc
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ConfigError(f"Unknown timezone: {self.timezone!r}") from exc

    def matches(self, path: Path) -> bool:
        """Return True if the file extension is one of ``markdown_ext``."""
        return path.suffix.lstrip(".").lower() in self.markdown_ext

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> StoreConfig:
        """Build a config from a parsed ``_config.yml`` mapping.

        Raises:
            ConfigError: If a recognised key has an unusable value.
        """
        kwargs: dict[str, Any] = {}

        if "posts_dir" in data:
            kwargs["posts_dir"] = str(data["posts_dir"])

        ext = data.get("markdown_ext")
        if ext is not None:
            if isinstance(ext, str):
                parts = ext.split(",")
            elif isinstance(ext, list):
                parts = [str(p) for p in ext]
            else:
                raise ConfigError(
                    f"markdown_ext must be a string or list, got {type(ext).__name__}"
                )
            cleaned = tuple(p.strip().lstrip(".").lower() for p in parts if p.strip())
            if not cleaned:
                raise ConfigError("markdown_ext is empty")
            kwargs["markdown_ext"] = cleaned

        if "unpublished" in data:
            kwargs["unpublished"] = bool(data["unpublished"])

        if data.get("timezone"):
            kwargs["timezone"] = str(data["timezone"])

        config = cls(**kwargs)
        # Fail at load time rather than on the first naive date.
        _ = config.tz
        return config


def load_config(root: Path) -> StoreConfig:
    """Read ``<root>/_config.yml``, or return defaults if it is absent.

    Args:
        root: Site root directory.

    Returns:
        The resolved ``StoreConfig``.

    Raises:
        ConfigError: If the file exists but cannot be read or parsed.
    """
    path = root / CONFIG_FILENAME
    if not path.is_file():
        logger.debug("No %s under %s, using defaults", CONFIG_FILENAME, root)
        return StoreConfig()

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        return StoreConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping")
    return StoreConfig.from_mapping(data)
