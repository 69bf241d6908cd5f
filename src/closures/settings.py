from __future__ import annotations

import dataclasses
import logging
import re
import string
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from .exceptions import ValidationError

logger = logging.getLogger(__name__)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class UserSettings:
    # Matched against the whole name, so no anchors are needed.
    name_pattern: str = "[A-Za-z ]+"

    def __post_init__(self) -> None:
        if not isinstance(self.name_pattern, str):
            raise ValidationError("Name pattern must be a string")
        try:
            re.compile(self.name_pattern)
        except re.error as e:
            raise ValidationError(f"Invalid name pattern {self.name_pattern!r}: {e}") from e


@dataclass(frozen=True)
class LivesSettings:
    """Lives tracking policy.

    floor: lowest value died() can reach. None means no floor, so the
    remaining count may go negative.
    """

    floor: Optional[int] = None

    def __post_init__(self) -> None:
        if self.floor is not None and not _is_int(self.floor):
            raise ValidationError(f"Lives floor must be an integer or null, got {self.floor!r}")


@dataclass(frozen=True)
class MessageSettings:
    template: str = "[{seq}] {text}"
    capacity: int = 1000

    def __post_init__(self) -> None:
        if not isinstance(self.template, str):
            raise ValidationError("Message template must be a string")
        try:
            fields = {name for _, name, _, _ in string.Formatter().parse(self.template) if name is not None}
            self.template.format(seq=1, text="")
        except (KeyError, IndexError, ValueError, AttributeError) as e:
            raise ValidationError(f"Invalid message template {self.template!r}: {e}") from e
        if fields != {"seq", "text"}:
            raise ValidationError("Message template must use exactly the fields {seq} and {text}")
        if not _is_int(self.capacity) or self.capacity <= 0:
            raise ValidationError("Message capacity must be positive")


@dataclass(frozen=True)
class PocketSettings:
    """Trinket prices and the non-negative policy for a pocket.

    With enforce_non_negative False (default) buy() and sell() apply their
    arithmetic unconditionally and coins or trinkets may go negative.
    """

    buy_price: int = 10
    sell_price: int = 5
    enforce_non_negative: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.enforce_non_negative, bool):
            raise ValidationError(f"enforce_non_negative must be a boolean, got {self.enforce_non_negative!r}")
        if not (_is_int(self.buy_price) and _is_int(self.sell_price)):
            raise ValidationError("Trinket prices must be integers")
        if self.buy_price <= 0 or self.sell_price <= 0:
            raise ValidationError("Trinket prices must be positive")


@dataclass(frozen=True)
class Settings:
    user: UserSettings = field(default_factory=UserSettings)
    lives: LivesSettings = field(default_factory=LivesSettings)
    messages: MessageSettings = field(default_factory=MessageSettings)
    pocket: PocketSettings = field(default_factory=PocketSettings)

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def _from_dict(cls, data: dict) -> "Settings":
        try:
            return cls(
                user=UserSettings(**data.get("user") or {}),
                lives=LivesSettings(**data.get("lives") or {}),
                messages=MessageSettings(**data.get("messages") or {}),
                pocket=PocketSettings(**data.get("pocket") or {}),
            )
        except TypeError as e:
            raise ValidationError(f"Invalid settings: {e}") from e

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        """Load settings from dataclass defaults and an optional YAML override file.

        If path is provided and exists, its values are overlaid onto the defaults.
        """
        default_data = dataclasses.asdict(cls())

        user_data = {}
        if path is not None:
            path = Path(path)
            if path.exists():
                user_data = cls._load_yaml(path)
                if not isinstance(user_data, dict):
                    raise ValidationError(f"Settings file {path} must contain a mapping")
                logger.info("Loaded settings from %s", path)
            else:
                logger.warning("Settings file not found: %s; using defaults", path)

        settings = cls._from_dict(cls._deep_merge(default_data, user_data))
        logger.debug("Settings merged: %s", settings)
        return settings

    def save(self, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(dataclasses.asdict(self), f, sort_keys=False)
        logger.info("Saved settings to %s", path)
