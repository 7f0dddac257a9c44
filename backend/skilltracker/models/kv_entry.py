from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.sql import func
from skilltracker.db import Base


class KeyValueEntry(Base):
    __tablename__ = "kv_entries"

    # Collection name, e.g. 'skill-tracker-skills'
    key = Column(String(128), primary_key=True, index=True)

    # JSON text; decoded by the storage layer, which tolerates garbage here
    value = Column(Text, nullable=False)

    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
