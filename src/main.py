"""
Proposal Studio - FastAPI Application Entry Point.

Turns a free-text project idea into a structured proposal using
Google Gemini, with curated fallback content whenever the AI path is
unavailable, and exports proposals as PDF.

Run with:
    uvicorn src.main:app --reload --port 8000
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from src.core.config import get_settings
from src.api.proposals import router as proposal_router

APP_VERSION = "1.0.0"
TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


# ===========================================
# Logging Configuration
# ===========================================

def setup_logging():
    """Configure application logging."""
    settings = get_settings()

    # Create formatter
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)
    root_logger.addHandler(console_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("weasyprint").setLevel(logging.WARNING)
    logging.getLogger("fontTools").setLevel(logging.WARNING)

    return logging.getLogger(__name__)


logger = setup_logging()


# ===========================================
# Application Lifespan
# ===========================================

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    logger.info("=" * 50)
    logger.info("Proposal Studio Starting Up")
    logger.info("=" * 50)
    logger.info(f"Environment: {'Development' if settings.DEBUG else 'Production'}")
    logger.info(f"Candidate models: {', '.join(settings.AI_MODELS)}")
    logger.info(f"Request timeout: {settings.REQUEST_TIMEOUT_SECONDS}s")

    if not settings.ai_configured:
        logger.warning("Google API key not configured - serving fallback proposals only")

    logger.info("Startup complete - ready to accept requests")

    yield

    # Shutdown
    logger.info("Proposal Studio shutting down...")


# ===========================================
# FastAPI Application
# ===========================================

def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Proposal Studio",
        description="""
        Turn a project idea into a structured, editable proposal.

        ## Endpoints

        - `POST /generate` - Generate a proposal from `{ "idea": "..." }`
        - `POST /generate-pdf` - Download `{ "proposal": {...} }` as PDF
        - `GET /health` - Health check
        """,
        version=APP_VERSION,
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(proposal_router)

    return app


# Create app instance
app = create_app()
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


# ===========================================
# UI and Info Endpoints
# ===========================================

@app.get("/", response_class=HTMLResponse, tags=["ui"])
async def index(request: Request):
    """Serve the proposal editor page."""
    settings = get_settings()
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "max_idea_length": settings.MAX_IDEA_LENGTH,
            "ai_configured": settings.ai_configured,
        }
    )


@app.get("/info", tags=["root"])
async def info():
    """Service information."""
    return JSONResponse({
        "service": "Proposal Studio",
        "version": APP_VERSION,
        "status": "running",
        "endpoints": {
            "generate": "POST /generate",
            "generate_pdf": "POST /generate-pdf",
            "health": "GET /health",
            "ui": "GET /",
            "docs": "GET /docs"
        }
    })


# ===========================================
# Error Handlers
# ===========================================

@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler for unhandled errors."""
    logger.error(f"Unhandled error: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "message": str(exc) if get_settings().DEBUG else "An error occurred"
        }
    )


# ===========================================
# Main Entry Point
# ===========================================

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info"
    )
