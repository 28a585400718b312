"""Checker settings and the strict-matching group policy.

These types carry no file handling; :mod:`strictversions.config` reads them
from YAML. Group entries are matched with shell-style wildcards, so
``com.google.*`` covers every Google group.
"""

from __future__ import annotations

import fnmatch
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from strictversions.exceptions import ConfigError


DEFAULT_STRICT_GROUPS: tuple[str, ...] = (
    "com.google.android.gms",
    "com.google.firebase",
)

DEFAULT_GROUP_ABBREVIATIONS: dict[str, str] = {
    "com.google.android.gms": "c.g.a.g",
    "com.google.firebase": "c.g.f",
}


# ---------------------------------------------------------------------------
# StrictMatchPolicy
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class StrictMatchPolicy:
    """Decides, per group id, whether strict version matching is enabled.

    A policy is either a set of group patterns or an arbitrary predicate.

    Attributes:
        patterns: Group ids or shell-style patterns (``com.google.*``).
        predicate: Optional callable taking a group id; when set it is
            consulted instead of ``patterns``.
    """

    patterns: frozenset[str] = frozenset(DEFAULT_STRICT_GROUPS)
    predicate: Callable[[str], bool] | None = None

    @classmethod
    def for_groups(cls, groups: Iterable[str]) -> StrictMatchPolicy:
        """Policy enabling strict matching for the given groups or patterns."""
        return cls(patterns=frozenset(groups))

    @classmethod
    def from_predicate(cls, predicate: Callable[[str], bool]) -> StrictMatchPolicy:
        """Policy delegating to ``predicate``."""
        return cls(patterns=frozenset(), predicate=predicate)

    @classmethod
    def everything(cls) -> StrictMatchPolicy:
        """Policy enabling strict matching for every group."""
        return cls(patterns=frozenset({"*"}))

    @classmethod
    def nothing(cls) -> StrictMatchPolicy:
        """Policy disabling strict matching for every group."""
        return cls(patterns=frozenset())

    def is_strict(self, group_id: str) -> bool:
        """Return True if strict matching is enabled for ``group_id``."""
        if self.predicate is not None:
            return bool(self.predicate(group_id))
        if group_id in self.patterns:
            return True
        return any(fnmatch.fnmatchcase(group_id, pattern) for pattern in self.patterns)


# ---------------------------------------------------------------------------
# CheckerConfig
# ---------------------------------------------------------------------------


@dataclass
class CheckerConfig:
    """Settings for a consistency check and its reporting.

    Attributes:
        strict_groups: Group ids or patterns with strict matching enabled.
        strict_predicate: Optional predicate overriding ``strict_groups``.
        fail_on_violation: Whether a failing report should fail the build.
        project_name: Name used in failure messages.
        message_addendum: Extra text appended to failure messages.
        group_abbreviations: Group id prefixes shortened in path listings.
    """

    strict_groups: tuple[str, ...] = DEFAULT_STRICT_GROUPS
    strict_predicate: Callable[[str], bool] | None = None
    fail_on_violation: bool = True
    project_name: str = "project"
    message_addendum: str = ""
    group_abbreviations: dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_GROUP_ABBREVIATIONS)
    )

    @property
    def policy(self) -> StrictMatchPolicy:
        """The strict-matching policy these settings describe."""
        if self.strict_predicate is not None:
            return StrictMatchPolicy.from_predicate(self.strict_predicate)
        return StrictMatchPolicy.for_groups(self.strict_groups)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CheckerConfig:
        """Build a config from a parsed mapping, validating keys and types.

        Raises:
            ConfigError: On unknown keys or values of the wrong type.
        """
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration must be a mapping, got {type(data).__name__}")

        unknown = set(data) - _CONFIG_KEYS
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        config = cls()
        if "strict_groups" in data:
            groups = data["strict_groups"]
            if not isinstance(groups, list) or not all(isinstance(g, str) for g in groups):
                raise ConfigError("strict_groups must be a list of strings")
            config.strict_groups = tuple(groups)
        if "fail_on_violation" in data:
            if not isinstance(data["fail_on_violation"], bool):
                raise ConfigError("fail_on_violation must be true or false")
            config.fail_on_violation = data["fail_on_violation"]
        for key in ("project_name", "message_addendum"):
            if key in data:
                if not isinstance(data[key], str):
                    raise ConfigError(f"{key} must be a string")
                setattr(config, key, data[key])
        if "group_abbreviations" in data:
            abbreviations = data["group_abbreviations"]
            if not isinstance(abbreviations, dict) or not all(
                isinstance(k, str) and isinstance(v, str) for k, v in abbreviations.items()
            ):
                raise ConfigError("group_abbreviations must map strings to strings")
            config.group_abbreviations = dict(abbreviations)
        return config


_CONFIG_KEYS = frozenset({
    "strict_groups",
    "fail_on_violation",
    "project_name",
    "message_addendum",
    "group_abbreviations",
})
