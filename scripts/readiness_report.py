from __future__ import annotations

import argparse
import csv
from pathlib import Path

from skills_matrix.services.readiness.career_readiness import rank_positions_by_readiness
from skills_matrix.utils.config import settings
from skills_matrix.utils.storage import DatasetError, DatasetStore


def main() -> None:
    """
    Offline readiness report:
    - Loads the configured dataset (or the bundled sample data)
    - Ranks every position for every person
    - Writes one CSV row per person x position
    """
    parser = argparse.ArgumentParser(description="Write a career readiness CSV for every person.")
    parser.add_argument("--dataset", type=Path, default=settings.dataset_path)
    parser.add_argument("--out", type=Path, default=Path(__file__).resolve().parent / "readiness_report.csv")
    args = parser.parse_args()

    try:
        dataset = DatasetStore(dataset_path=args.dataset).load()
    except (FileNotFoundError, DatasetError) as e:
        raise SystemExit(str(e)) from e

    position_names = {p.id: p.name for p in dataset.positions}

    with args.out.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(
            f,
            fieldnames=[
                "person_id",
                "person_name",
                "current_position",
                "target_position",
                "is_ready",
                "gap_count",
                "missing_skills_top",
            ],
        )
        w.writeheader()

        for person in dataset.people:
            for r in rank_positions_by_readiness(person, dataset.positions, dataset.skills):
                w.writerow(
                    {
                        "person_id": person.id,
                        "person_name": person.name,
                        "current_position": position_names.get(person.position_id, ""),
                        "target_position": r.position.name,
                        "is_ready": r.is_ready,
                        "gap_count": len(r.missing_skills),
                        "missing_skills_top": ", ".join(g.skill.name for g in r.missing_skills[:3]),
                    }
                )

    print(f"Wrote: {args.out}")


if __name__ == "__main__":
    main()
