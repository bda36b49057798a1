"""
Color Tools MCP Server - FastAPI implementation
Provides endpoints for parsing, converting and formatting CSS colors
"""

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
import uvicorn
from fastapi_mcp import FastApiMCP

from colorcore import ServiceSettings
from schemas import ErrorResponse

# Routers
from routers import colorTools_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Color Tools MCP Server",
    description="A FastAPI server for CSS color parsing, conversion and formatting",
    version="1.0.0"
)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

@app.exception_handler(HTTPException)
async def http_error_handler(request: Request, exc: HTTPException):
    """Render tool failures as ErrorResponse bodies"""
    body = ErrorResponse(success=False, detail=str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())

# Mount routers (paths unchanged)
app.include_router(colorTools_router)


def run(settings: ServiceSettings) -> None:
    """Configure logging, optionally mount MCP, and serve."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.mount_mcp:
        mcp = FastApiMCP(app, exclude_operations=[])
        mcp.mount_http()
        logger.info("MCP server mounted")
    logger.info(f"Starting color tools server on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run(ServiceSettings.from_env())
