from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

import yaml

from .hand_eval import CATEGORIES


@dataclass(frozen=True, slots=True)
class RuleSet:
    name: str
    include_wildcard: bool = True
    labels: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def default(cls) -> "RuleSet":
        return cls(name="Joker Poker")

    @classmethod
    def from_yaml(cls, path: str) -> "RuleSet":
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Rule set {path} must be a mapping")

        name = str(data.get("name", "Unnamed RuleSet"))
        include_wildcard = data.get("include_wildcard", True)
        if not isinstance(include_wildcard, bool):
            raise ValueError(f"include_wildcard must be true or false, got {include_wildcard!r}")

        labels = dict(data.get("labels") or {})
        for k, v in labels.items():
            if k not in CATEGORIES:
                raise ValueError(f"Unknown hand category in labels: {k!r}")
            if not isinstance(v, str) or not v:
                raise ValueError(f"Invalid label for {k}: {v!r}")

        return cls(name=name, include_wildcard=include_wildcard, labels=labels)
