from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal, Mapping

GapStatus = Literal["deficit", "met", "excess", "not-required"]

SKILL_RANKS: Mapping[int, str] = MappingProxyType(
    {
        1: "Beginner",
        2: "Intermediate",
        3: "Advanced",
    }
)


def rank_label(level: int) -> str | None:
    return SKILL_RANKS.get(level)


def level_of(levels: Mapping[str, int], skill_id: str) -> int:
    """Sparse lookup: an absent skill id means level 0."""
    return levels.get(skill_id) or 0


def _frozen_levels(levels: Mapping[str, int] | None) -> Mapping[str, int]:
    return MappingProxyType(dict(levels or {}))


@dataclass(frozen=True)
class Skill:
    id: str
    name: str


@dataclass(frozen=True)
class Position:
    id: str
    name: str
    requirements: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only view over a private copy; callers can't mutate it through us.
        object.__setattr__(self, "requirements", _frozen_levels(self.requirements))


@dataclass(frozen=True)
class Person:
    id: str
    name: str
    position_id: str
    acquired: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "acquired", _frozen_levels(self.acquired))


@dataclass(frozen=True)
class SkillGap:
    skill: Skill
    required: int
    acquired: int
    gap: int
    status: GapStatus


@dataclass(frozen=True)
class CareerReadiness:
    position: Position
    is_ready: bool
    missing_skills: tuple[SkillGap, ...]
