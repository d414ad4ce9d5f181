import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import models  # noqa: F401  (register tables on Base.metadata)
from db import Base, engine
from errors import WorkflowError

# Routers
from routers.health import router as health_router
from routers.hints import router as hints_router
from routers.history import router as history_router
from routers.problems import router as problems_router
from routers.sessions import router as sessions_router
from routers.submissions import router as submissions_router

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger("maths-coach")

# Fresh SQLite dev databases get their tables without running Alembic
if engine.url.get_backend_name() == "sqlite":
    Base.metadata.create_all(bind=engine)

app = FastAPI(title="Primary Maths Coach API")

# Next.js dev server plus any deployed frontends from CORS_ORIGINS
_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
_origins += [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(WorkflowError)
async def workflow_error_handler(request: Request, exc: WorkflowError):
    # Reached only when a dependency (e.g. the model client) fails before a route runs
    logger.error("unhandled workflow error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Please try again"})


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(problems_router)  # /generate-problem, /math-problem
app.include_router(hints_router)  # /get-hint
app.include_router(submissions_router)  # /submit-answer
app.include_router(history_router)  # /history
app.include_router(sessions_router)  # /sessions/...
app.include_router(health_router)  # /health/...
