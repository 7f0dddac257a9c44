from datetime import date, timedelta
import random

from skilltracker.core.date_utils import format_date, week_start
from skilltracker.db import Base, SessionLocal, engine
from skilltracker.models.kv_entry import KeyValueEntry
from skilltracker.services.logs import log_execution
from skilltracker.services.skills import create_skill
from skilltracker.storage.execution_store import ExecutionStore
from skilltracker.storage.kv import SqlKeyValueStore


DEMO_SKILLS = [
    ("Meditation", 7),
    ("Spanish practice", 5),
    ("Strength training", 3),
]


def clear_store(db) -> None:
    """Drop both collections so we can reseed cleanly."""
    db.query(KeyValueEntry).delete()
    db.commit()


def seed_demo_skills(store: ExecutionStore) -> None:
    """Create demo skills and random logs for this week up to today."""
    today = date.today()
    monday = week_start(today)

    logged = 0
    for name, goal in DEMO_SKILLS:
        skill = create_skill(store, name, goal)
        for offset in range(7):
            d = monday + timedelta(days=offset)
            # Skip future days
            if d > today:
                continue
            if random.random() < 0.6:
                log_execution(store, skill.id, format_date(d), random.randint(1, 2))
                logged += 1

    print(f"Seeded {len(DEMO_SKILLS)} demo skills and {logged} logs")


def main():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        clear_store(db)
        seed_demo_skills(ExecutionStore(SqlKeyValueStore(db)))
    finally:
        db.close()


if __name__ == "__main__":
    main()
