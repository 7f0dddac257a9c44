#!/usr/bin/env python3
"""
Seed a few skills and a partial week of executions into the Skill Tracker API.

Pattern (current week, Mon up to today):
  - Reading:  goal 5, one session most days
  - Guitar:   goal 3, a double session mid-week
  - Running:  goal 4, every other day

Usage examples:
  - Against a local backend:
      python scripts/seed_demo_week.py --base-url http://localhost:8000
  - Add quick logs for today on top:
      python scripts/seed_demo_week.py --base-url http://localhost:8000 --quick
"""

from __future__ import annotations

import argparse
import datetime as dt
import sys

try:
    import requests  # type: ignore
except Exception as exc:  # pragma: no cover
    print("This script requires the 'requests' package.\nInstall with: pip install requests", file=sys.stderr)
    raise


# name -> (weekly goal, {weekday index (Mon=0): count})
DEMO_SKILLS = {
    "Reading": (5, {0: 1, 1: 1, 3: 1, 4: 1}),
    "Guitar": (3, {2: 2}),
    "Running": (4, {0: 1, 2: 1, 4: 1, 6: 1}),
}


def monday_of_week(d: dt.date) -> dt.date:
    # same Monday as skilltracker.core.date_utils.week_start; keep the two in step
    return d - dt.timedelta(days=d.weekday())


def post_json(base_url: str, path: str, payload: dict) -> dict:
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    r = requests.post(url, json=payload, timeout=15)
    if r.status_code >= 300:
        raise RuntimeError(f"{path} -> HTTP {r.status_code}: {r.text}")
    return r.json()


def seed_skill(base_url: str, name: str, goal: int, days: dict, monday: dt.date, today: dt.date) -> int:
    skill = post_json(base_url, "skills/", {"name": name, "weekly_goal": goal})
    logged = 0
    for dow, count in days.items():
        day = monday + dt.timedelta(days=dow)
        # Skip future days
        if day > today:
            continue
        post_json(
            base_url,
            "logs/",
            {"skill_id": skill["id"], "date": day.isoformat(), "count": count},
        )
        logged += 1
    return logged


def main() -> None:
    ap = argparse.ArgumentParser(description="Seed demo skills and this week's logs")
    ap.add_argument("--base-url", required=True, help="API base URL (e.g., http://localhost:8000)")
    ap.add_argument("--quick", action="store_true", help="Also quick-log each skill once for today")
    args = ap.parse_args()

    today = dt.date.today()
    monday = monday_of_week(today)

    total = 0
    for name, (goal, days) in DEMO_SKILLS.items():
        total += seed_skill(args.base_url, name, goal, days, monday, today)

    if args.quick:
        r = requests.get(f"{args.base_url.rstrip('/')}/skills/", timeout=15)
        r.raise_for_status()
        for skill in r.json():
            post_json(args.base_url, "logs/quick", {"skill_id": skill["id"]})

    print(f"Seed complete: {len(DEMO_SKILLS)} skills, {total} logs.")


if __name__ == "__main__":
    main()
