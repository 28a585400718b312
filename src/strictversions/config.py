"""Loading checker configuration from YAML.

Configuration is a small YAML document::

    strict_groups:
      - com.google.android.gms
      - com.google.firebase
    fail_on_violation: true
    project_name: app
    message_addendum: "See https://developers.google.com/android/guides/versioning"
    group_abbreviations:
      com.google.android.gms: c.g.a.g
      com.google.firebase: c.g.f

Every key is optional. The settings types live in
:mod:`strictversions.core.settings` and are re-exported here.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from strictversions.core.settings import (
    DEFAULT_GROUP_ABBREVIATIONS,
    DEFAULT_STRICT_GROUPS,
    CheckerConfig,
    StrictMatchPolicy,
)
from strictversions.exceptions import ConfigError

__all__ = [
    "DEFAULT_GROUP_ABBREVIATIONS",
    "DEFAULT_STRICT_GROUPS",
    "CheckerConfig",
    "StrictMatchPolicy",
    "load_config",
]


def load_config(path: Path | str) -> CheckerConfig:
    """Load a ``CheckerConfig`` from a YAML file.

    An empty file yields the defaults.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        The parsed configuration.

    Raises:
        ConfigError: If the file cannot be read or is invalid.
    """
    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read configuration file {config_path}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
    if data is None:
        return CheckerConfig()
    return CheckerConfig.from_dict(data)
