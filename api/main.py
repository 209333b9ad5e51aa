from dotenv import load_dotenv
load_dotenv()

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.pathway_router import router as pathway_router
from pathway.config import settings
from pathway.logger import get_logger
from pathway.service import build_pathway_service, build_skill_extractor

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The graph is seeded once, before the first request reads it.
    app.state.assembler = build_pathway_service(settings)
    app.state.skill_extractor = build_skill_extractor(app.state.assembler.store, settings)
    logger.info("Learning Pathway API started")
    yield


app = FastAPI(
    title="Learning Pathway API",
    description="Recommends learning pathways from current skills to AI-enhanced roles.",
    version="1.0.0",
    lifespan=lifespan,
)

origins = [
    "http://localhost",
    "http://localhost:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pathway_router)


@app.get("/")
def read_root():
    return {"message": "Learning Pathway API is running."}


@app.get("/health")
def health(request: Request):
    assembler = getattr(request.app.state, "assembler", None)
    return {
        "status": "healthy" if assembler is not None else "starting",
        "nodes": len(assembler.store) if assembler is not None else 0,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
