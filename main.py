"""
Dream League - Esports Match Simulation API
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.database import init_db
from app.logging_config import setup_logging
from app.api.match import router as match_router
from app.api.tournament import router as tournament_router

setup_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database on startup"""
    init_db()
    yield


# Initialize FastAPI app
app = FastAPI(
    title="Dream League",
    description="Esports Match Simulation API",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS origins - configurable via environment variable
default_origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

# Add custom origins from environment (comma-separated)
if settings.CORS_ORIGINS:
    default_origins.extend([o.strip() for o in settings.CORS_ORIGINS.split(",") if o.strip()])

app.add_middleware(
    CORSMiddleware,
    allow_origins=default_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(match_router, prefix="/api")
app.include_router(tournament_router, prefix="/api")


@app.get("/")
def root():
    """Health check endpoint"""
    return {
        "name": "Dream League API",
        "version": "0.1.0",
        "status": "running",
    }


@app.get("/api/health")
def health_check():
    """API health check"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
