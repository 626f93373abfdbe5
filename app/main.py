import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.exceptions import HydrationValidationError
from app.graph.hydration_graph import build_graph
from app.routes.hydration import router as hydration_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Application lifespan  (startup / shutdown)
# ─────────────────────────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s v%s", settings.APP_TITLE, settings.APP_VERSION)
    yield   # application runs here
    logger.info("Shutting down %s", settings.APP_TITLE)


app = FastAPI(
    title=settings.APP_TITLE,
    description="Detects over- or under-hydration based on habits and environment",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(hydration_router)

graph = build_graph()


@app.get("/")
def root():
    """API information."""
    return {
        "app": settings.APP_TITLE,
        "version": settings.APP_VERSION,
        "status": "active",
        "endpoints": {
            "/hydration/deviation": "POST - Classify daily water intake",
            "/hydration/levels": "GET - List deviation levels",
            "/analyze": "POST - Run the hydration analysis graph",
        }
    }


@app.get("/health")
def health_check():
    """Lightweight ping used by clients to auto-detect the backend URL."""
    return {"status": "ok"}


@app.post("/analyze")
def analyze(data: dict):
    """
    Analyze hydration data using the agent graph.

    Expected input format:
    {
        "profile": {
            "weight_kg": 70,
            "activity_level": "moderate",
            "climate": "hot",
            "thirst_level": "normal"
        },
        "hydration_log": {
            "avg_intake_ml": 2200
        }
    }
    """
    try:
        result = graph.invoke(data)
    except HydrationValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=e.to_dict(),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=422,
            detail={"code": "invalid_input", "message": str(e)},
        )
    return result
