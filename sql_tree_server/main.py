"""
FastAPI application entry point.
"""

from fastapi import FastAPI

from sql_tree_server import __version__
from sql_tree_server.api import parse
from sql_tree_server.config import settings
from sql_tree_server.mcp.server import mount_sse
from sql_tree_server.mcp.tools import TOOL_DEFINITIONS
from sql_tree_server.models.api_response import HealthResponse, ServiceInfo
from sql_tree_server.utils.logging import setup_logging, get_logger

# Configure structured logging
setup_logging(settings.log_level)

logger = get_logger(__name__)

# Create FastAPI application
app = FastAPI(
    title="SQL Parse Tree Service",
    description="Parses SQL with tree-sitter and returns a textual rendering of the syntax tree",
    version=__version__
)


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint for container orchestration."""
    return HealthResponse(status="healthy", version=__version__)


@app.get("/", response_model=ServiceInfo)
async def root() -> ServiceInfo:
    """Root endpoint."""
    return ServiceInfo(
        message="SQL Parse Tree Service",
        version=__version__,
        docs="/docs",
        grammar=settings.grammar,
        tools=[defn["name"] for defn in TOOL_DEFINITIONS],
    )


# Include API routers
app.include_router(parse.router)

# MCP over SSE: GET /sse, POST /messages/
mount_sse(app)


@app.on_event("startup")
async def startup_event():
    """Load the grammar on application startup."""
    logger.info("Starting SQL Parse Tree Service")

    from sql_tree_server.services.parse_service import get_parse_service
    service = get_parse_service()
    logger.info(f"Grammar '{service.grammar_name}' loaded")


@app.on_event("shutdown")
async def shutdown_event():
    """Log application shutdown."""
    logger.info("Shutting down SQL Parse Tree Service")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
