from __future__ import annotations

from typing import Iterable, Mapping

from skills_matrix.models.entities import GapStatus, Person, Position, Skill, SkillGap, level_of


def index_skills(catalog: Iterable[Skill]) -> dict[str, Skill]:
    return {skill.id: skill for skill in catalog}


def classify_gap(required: int, acquired: int) -> GapStatus:
    if required == 0:
        return "not-required"
    gap = acquired - required
    if gap < 0:
        return "deficit"
    if gap == 0:
        return "met"
    return "excess"


def compute_gaps_for_current_role(
    person: Person,
    position: Position,
    catalog: Iterable[Skill],
) -> list[SkillGap]:
    """
    Gap detail for a person against one position, sorted by skill name.

    Covers every skill the person holds (whether required or not) plus every
    required skill the person does not hold. Skill ids missing from the
    catalog are dropped.
    """
    skills = index_skills(catalog)
    gaps: list[SkillGap] = []
    seen: set[str] = set()

    for skill_id, acquired in person.acquired.items():
        skill = skills.get(skill_id)
        if skill is None:
            continue
        required = level_of(position.requirements, skill_id)
        gaps.append(
            SkillGap(
                skill=skill,
                required=required,
                acquired=acquired,
                gap=acquired - required,
                status=classify_gap(required, acquired),
            )
        )
        seen.add(skill_id)

    for skill_id, required in position.requirements.items():
        # Each skill id is reported at most once: a skill held at level 0 and required
        # was already emitted as a deficit by the loop above. Level <= 0 requirements
        # mean "not required".
        if skill_id in seen or required <= 0 or level_of(person.acquired, skill_id):
            continue
        skill = skills.get(skill_id)
        if skill is None:
            continue
        gaps.append(SkillGap(skill=skill, required=required, acquired=0, gap=-required, status="deficit"))

    return sorted(gaps, key=lambda g: g.skill.name)


def compute_gaps_for_target_role(
    person: Person,
    target_position: Position,
    catalog: Iterable[Skill],
) -> list[SkillGap]:
    """Deficits blocking a move into target_position, largest shortfall first."""
    return target_role_deficits(person, target_position, index_skills(catalog))


def target_role_deficits(
    person: Person,
    target_position: Position,
    skills: Mapping[str, Skill],
) -> list[SkillGap]:
    """Same as compute_gaps_for_target_role, against an already built id -> Skill index."""
    needed: list[SkillGap] = []

    for skill_id, required in target_position.requirements.items():
        skill = skills.get(skill_id)
        if skill is None:
            continue
        acquired = level_of(person.acquired, skill_id)
        gap = acquired - required
        if gap < 0:
            needed.append(SkillGap(skill=skill, required=required, acquired=acquired, gap=gap, status="deficit"))

    return sorted(needed, key=lambda g: g.gap)
