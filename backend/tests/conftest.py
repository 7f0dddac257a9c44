import os

# Must be set before skilltracker.db builds its engine
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
