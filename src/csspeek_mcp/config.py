"""Settings for selector lookup and document filtering."""

import os
from dataclasses import dataclass, field, replace
from typing import Any, Optional

import pathspec


DEFAULT_PEEK_FROM_LANGUAGES = ["html"]
DEFAULT_PEEK_TO_EXCLUDE = ["**/node_modules/**", "**/bower_components/**"]

# Editor (camelCase) spelling -> field name
_SETTING_ALIASES = {
    "supportTags": "support_tags",
    "peekFromLanguages": "peek_from_languages",
    "peekToExclude": "peek_to_exclude",
}


@dataclass
class Settings:
    """Typed settings bag.

    Attributes:
        support_tags: Resolve bare tag names (``<div>``) as tag selectors.
        peek_from_languages: Language ids of markup documents that may
            request definitions.
        peek_to_exclude: Glob patterns (gitwildmatch syntax) of documents
            that are never indexed nor peeked from.
    """
    support_tags: bool = True
    peek_from_languages: list[str] = field(default_factory=lambda: list(DEFAULT_PEEK_FROM_LANGUAGES))
    peek_to_exclude: list[str] = field(default_factory=lambda: list(DEFAULT_PEEK_TO_EXCLUDE))

    def __post_init__(self):
        if not isinstance(self.support_tags, bool):
            raise ValueError(f"support_tags must be a boolean, got {type(self.support_tags).__name__}")
        for name in ("peek_from_languages", "peek_to_exclude"):
            value = getattr(self, name)
            if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
                raise ValueError(f"{name} must be a list of strings")
            setattr(self, name, list(value))
        self._exclude_spec = pathspec.PathSpec.from_lines("gitwildmatch", self.peek_to_exclude)

    @classmethod
    def from_dict(cls, data: Optional[dict], base: Optional["Settings"] = None) -> "Settings":
        """Build settings from a (possibly partial) dict.

        Accepts snake_case field names or the editor's camelCase names,
        optionally nested under a ``cssPeek`` key. Missing keys keep the
        value from ``base`` (or the defaults).
        """
        base = base or cls()
        if not data:
            return replace(base)
        if not isinstance(data, dict):
            raise ValueError("settings must be an object")
        if "cssPeek" in data:
            data = data["cssPeek"] or {}
            if not isinstance(data, dict):
                raise ValueError("cssPeek settings must be an object")

        updates: dict[str, Any] = {}
        for key, value in data.items():
            name = _SETTING_ALIASES.get(key, key)
            if name not in ("support_tags", "peek_from_languages", "peek_to_exclude"):
                raise ValueError(f"Unknown setting: {key}")
            updates[name] = value

        return replace(base, **updates)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``CSS_PEEK_*`` environment variables."""
        data: dict[str, Any] = {}

        support_tags = os.environ.get("CSS_PEEK_SUPPORT_TAGS")
        if support_tags is not None:
            data["support_tags"] = support_tags.strip().lower() not in ("0", "false", "no", "off", "")

        languages = os.environ.get("CSS_PEEK_FROM_LANGUAGES")
        if languages is not None:
            data["peek_from_languages"] = _split_list(languages)

        exclude = os.environ.get("CSS_PEEK_TO_EXCLUDE")
        if exclude is not None:
            data["peek_to_exclude"] = _split_list(exclude)

        return cls.from_dict(data)

    def is_excluded(self, path: str) -> bool:
        """Check if a path matches any ``peek_to_exclude`` pattern."""
        normalized = path.replace("\\", "/")
        return self._exclude_spec.match_file(normalized)

    def to_dict(self) -> dict:
        return {
            "support_tags": self.support_tags,
            "peek_from_languages": list(self.peek_from_languages),
            "peek_to_exclude": list(self.peek_to_exclude),
        }


def _split_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]
