"""Emit a summary of the documented predicate cases and check each one."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

from typefy.catalog import CATALOG, PREDICATES, SYNONYMS, run_case, write_json


def _label(outcome: object) -> object:
    return outcome if isinstance(outcome, bool) else outcome.__name__


def summarize() -> dict[str, object]:
    rows = []
    for case in CATALOG:
        got = run_case(case)
        rows.append(
            {
                "id": case.id,
                "predicate": case.predicate,
                "args": repr(case.args),
                "expected": _label(case.expected),
                "got": _label(got),
                "ok": got == case.expected,
                "note": case.note,
            }
        )
    by_predicate = Counter(case.predicate for case in CATALOG)
    return {
        "total_cases": len(CATALOG),
        "failing": [row["id"] for row in rows if not row["ok"]],
        "by_predicate": dict(sorted(by_predicate.items())),
        "uncovered": sorted(set(PREDICATES) - set(by_predicate)),
        "synonyms": dict(sorted(SYNONYMS.items())),
        "cases": rows,
    }


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--json-out",
        default="output/predicate_catalog.json",
        help="where to write machine-readable catalog summary",
    )
    args = parser.parse_args()

    payload = summarize()

    print("Predicate case catalog")
    print("----------------------")
    print(f"total cases: {payload['total_cases']}")
    print("cases per predicate:")
    for key, count in payload["by_predicate"].items():
        print(f"  - {key}: {count}")
    print(f"predicates without cases: {len(payload['uncovered'])}")
    failing = payload["failing"]
    print(f"failing cases: {len(failing)}")
    for case_id in failing:
        print(f"  - {case_id}")

    write_json(Path(args.json_out), payload)
    return 1 if failing else 0


if __name__ == "__main__":
    raise SystemExit(main())
