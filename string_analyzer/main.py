from fastapi import FastAPI, Request, status
from starlette.exceptions import HTTPException
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from datetime import datetime, timezone
import logging

from string_analyzer.api.routes import router
from string_analyzer.config import APP_VERSION, get_settings
from string_analyzer.errors import StringAnalyzerError, UnparseableQueryError
from string_analyzer.store import init_store

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="String Analyzer Service",
    description="Analyze, store and filter strings by their computed properties",
    version=APP_VERSION
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Start every process with an empty store
@app.on_event("startup")
def on_startup():
    init_store(app)

# Include routers
app.include_router(router, tags=["strings"])

# Root endpoint
@app.get("/")
def root():
    return {
        "message": "String Analyzer Service API",
        "version": APP_VERSION,
        "status": "running",
        "endpoints": {
            "POST /strings": "Analyze and store a string",
            "GET /strings/{string_value}": "Get specific string analysis",
            "GET /strings": "Get all strings with optional filters",
            "GET /strings/filter-by-natural-language": "Filter using natural language",
            "DELETE /strings/{string_value}": "Delete a string"
        }
    }

@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

# Domain error handler
@app.exception_handler(StringAnalyzerError)
async def string_analyzer_exception_handler(request: Request, exc: StringAnalyzerError):
    logger.warning(f"{request.method} {request.url.path} failed: {exc.message}")
    content = {"error": exc.message}
    if isinstance(exc, UnparseableQueryError):
        content["interpreted_query"] = {
            "original": exc.query,
            "parsed_filters": {}
        }
    return JSONResponse(status_code=exc.status_code, content=content)

# HTTPException handler
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    # If detail is already a dict with 'error' key, return as is
    if isinstance(exc.detail, dict) and 'error' in exc.detail:
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.detail
        )
    # Otherwise wrap it
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)}
    )

# Generic error handler
@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error"
        }
    )


def run():
    import uvicorn
    uvicorn.run("string_analyzer.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
