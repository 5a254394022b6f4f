import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .db import init_models
from .routers import ingest, lists, parse, tasks

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_models()
    logger.info("quickadd ready (env=%s, tz=%s)", settings.app_env, settings.user_timezone)
    yield


app = FastAPI(title="Quick Add - Task Parser Service", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(parse.router, prefix="/parse", tags=["parse"])
app.include_router(ingest.router, prefix="/ingest", tags=["ingest"])
app.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
app.include_router(lists.router, prefix="/lists", tags=["lists"])


@app.get("/")
def root():
    return {"ok": True, "service": "quickadd", "version": "0.1.0"}
