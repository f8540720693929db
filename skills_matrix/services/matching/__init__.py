"""Capability matching engine (gap detail, target-role deficits, readiness ranking)."""

from skills_matrix.services.gap.skill_gap import (
    classify_gap,
    compute_gaps_for_current_role,
    compute_gaps_for_target_role,
)
from skills_matrix.services.readiness.career_readiness import (
    potential_positions,
    rank_positions_by_readiness,
    ready_positions,
)

__all__ = [
    "classify_gap",
    "compute_gaps_for_current_role",
    "compute_gaps_for_target_role",
    "potential_positions",
    "rank_positions_by_readiness",
    "ready_positions",
]
