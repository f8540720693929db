from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal

from skills_matrix.models.entities import Person, Position, Skill
from skills_matrix.services.readiness.career_readiness import rank_positions_by_readiness

SupplyStatus = Literal["critical", "low", "medium", "high"]


@dataclass(frozen=True)
class PositionSupply:
    position: Position
    ready_people: tuple[Person, ...]
    current_employees: tuple[Person, ...]

    @property
    def ready_count(self) -> int:
        return len(self.ready_people)

    @property
    def current_count(self) -> int:
        return len(self.current_employees)

    @property
    def total_supply(self) -> int:
        # A current holder who is also ready is counted in both groups.
        return self.ready_count + self.current_count

    @property
    def status(self) -> SupplyStatus:
        return supply_status(self.ready_count, self.current_count)


def supply_status(ready: int, current: int) -> SupplyStatus:
    total = ready + current
    if total == 0:
        return "critical"
    if total <= 2:
        return "low"
    if total <= 5:
        return "medium"
    return "high"


def compute_position_supply(
    position: Position,
    people: Iterable[Person],
    catalog: Iterable[Skill],
) -> PositionSupply:
    catalog = list(catalog)
    people = list(people)

    ready = [p for p in people if rank_positions_by_readiness(p, [position], catalog)[0].is_ready]
    current = [p for p in people if p.position_id == position.id]

    return PositionSupply(position=position, ready_people=tuple(ready), current_employees=tuple(current))


def compute_supply(
    positions: Iterable[Position],
    people: Iterable[Person],
    catalog: Iterable[Skill],
) -> list[PositionSupply]:
    """Supply per position, in input position order."""
    catalog = list(catalog)
    people = list(people)
    return [compute_position_supply(position, people, catalog) for position in positions]
