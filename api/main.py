"""
World Clock API - Main Application.

FastAPI application serving configured places and their shading status.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import __version__

# Create FastAPI application
app = FastAPI(
    title="World Clock API",
    description="REST API for world clock places and their work/civil hours",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Read-only API; any origin may poll it
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.get("/health", tags=["Health"])
def health_check():
    """
    Health check endpoint.

    Returns the API status and version.
    """
    return {
        "status": "healthy",
        "version": __version__,
        "service": "world-clock-api"
    }


@app.get("/", tags=["Root"])
def root():
    """
    Root endpoint with API information.
    """
    return {
        "message": "World Clock API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health"
    }


# Import and include routers
from api.routers import places

app.include_router(places.router, prefix="/api/v1", tags=["Places"])
