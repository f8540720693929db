from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from skills_matrix.data import sample_data
from skills_matrix.models.entities import Person, Position, Skill

logger = logging.getLogger(__name__)


class DatasetError(RuntimeError):
    pass


class _SkillRecord(BaseModel):
    id: str
    name: str


class _PositionRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    requirements: dict[str, int] = Field(default_factory=dict, alias="skills_needed")


class _PersonRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    position_id: str
    acquired: dict[str, int] = Field(default_factory=dict, alias="skills_acquired")


class _DatasetRecord(BaseModel):
    skills: list[_SkillRecord] = Field(default_factory=list)
    positions: list[_PositionRecord] = Field(default_factory=list)
    people: list[_PersonRecord] = Field(default_factory=list)


@dataclass(frozen=True)
class Dataset:
    skills: tuple[Skill, ...]
    positions: tuple[Position, ...]
    people: tuple[Person, ...]

    def get_person(self, person_id: str) -> Person:
        for person in self.people:
            if person.id == person_id:
                return person
        raise KeyError(f"Unknown person_id: {person_id}")

    def get_position(self, position_id: str) -> Position:
        for position in self.positions:
            if position.id == position_id:
                return position
        raise KeyError(f"Unknown position_id: {position_id}")


def parse_dataset(payload: Any) -> Dataset:
    """
    Build a Dataset from decoded JSON.

    Positions accept `requirements` or `skills_needed`; people accept
    `acquired` or `skills_acquired`.
    """
    try:
        record = _DatasetRecord.model_validate(payload)
    except ValidationError as e:
        raise DatasetError(f"Invalid dataset: {e}") from e

    return Dataset(
        skills=tuple(Skill(id=s.id, name=s.name) for s in record.skills),
        positions=tuple(Position(id=p.id, name=p.name, requirements=p.requirements) for p in record.positions),
        people=tuple(
            Person(id=p.id, name=p.name, position_id=p.position_id, acquired=p.acquired) for p in record.people
        ),
    )


def load_dataset(path: Path) -> Dataset:
    if not path.exists():
        raise FileNotFoundError(f"Dataset file not found: {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DatasetError(f"Failed to read dataset {path}: {e}") from e

    dataset = parse_dataset(payload)
    logger.info(
        "Loaded dataset from %s: %d skills, %d positions, %d people",
        path,
        len(dataset.skills),
        len(dataset.positions),
        len(dataset.people),
    )
    return dataset


def sample_dataset() -> Dataset:
    return Dataset(
        skills=tuple(sample_data.SKILLS),
        positions=tuple(sample_data.POSITIONS),
        people=tuple(sample_data.PEOPLE),
    )


@dataclass(frozen=True)
class DatasetStore:
    dataset_path: Path | None = None

    def load(self) -> Dataset:
        if self.dataset_path is None:
            logger.info("No dataset_path configured; serving bundled sample data")
            return sample_dataset()
        return load_dataset(self.dataset_path)

