from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from skilltracker.api.skills import router as skills_router
from skilltracker.api.logs import router as logs_router
from skilltracker.api.reports import router as reports_router
from skilltracker.db import Base, engine
from skilltracker.models.kv_entry import KeyValueEntry  # noqa: F401  (import ensures table is registered)
from skilltracker.core.config import settings
from skilltracker.core.logging_config import setup_logging


logger = setup_logging()

app = FastAPI(title="Skill Tracker")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create the key/value table on startup
Base.metadata.create_all(bind=engine)

app.include_router(skills_router)
app.include_router(logs_router)
app.include_router(reports_router)

logger.info("Skill Tracker backend ready (database: %s)", engine.url.render_as_string(hide_password=True))


@app.get("/")
def root():
    return {"message": "Skill Tracker backend is running"}
