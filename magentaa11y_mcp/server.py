"""FastAPI MCP Server for MagentaA11y accessibility criteria."""

import json
import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.responses import JSONResponse

from . import __version__
from .config import settings
from .engine import ContentLoader
from .engine.core.errors import InitializationError
from .engine.handlers import HandlerContext, execute_tool
from .mcp import PARSE_ERROR, handle_message, jsonrpc_error
from .models import HealthResponse, MCPRequest, Platform, ReadyResponse, ToolResult

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the server process."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
    )


def build_loader() -> ContentLoader:
    return ContentLoader(
        settings.content_root,
        search_threshold=settings.search_threshold,
        suggest_threshold=settings.suggest_threshold,
        max_snippets=settings.max_snippets,
        snippet_max_chars=settings.snippet_max_chars,
    )


def create_app(loader: ContentLoader | None = None) -> FastAPI:
    """Build the FastAPI application around a content loader.

    The loader is initialized in the lifespan handler; startup fails if the
    content cannot be indexed.
    """
    loader = loader or build_loader()
    ctx = HandlerContext(
        loader=loader,
        default_max_results=settings.default_max_results,
        suggestion_limit=settings.suggestion_limit,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup/shutdown."""
        logger.info(f"Starting MagentaA11y MCP Server v{__version__}")
        try:
            await loader.initialize()
        except InitializationError as e:
            logger.error(f"Failed to initialize content: {e}")
            logger.error(f"Make sure the content root exists: {loader.content_root}")
            raise
        logger.info("Content indexed successfully")
        yield
        logger.info("MagentaA11y MCP Server stopped")

    app = FastAPI(
        title="MagentaA11y MCP Server",
        description="Accessibility acceptance criteria from MagentaA11y for AI agents",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.loader = loader
    app.state.handler_context = ctx

    # ============ EXCEPTION HANDLERS ============

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with consistent response format."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": exc.detail},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions with sanitized error messages."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "An internal server error occurred. Please try again."},
        )

    # ============ HEALTH ENDPOINTS ============

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint (lightweight liveness check)."""
        return HealthResponse(status="healthy", version=__version__, timestamp=datetime.now(UTC))

    @app.get("/ready", tags=["Health"])
    async def readiness_check():
        """Readiness check: the content index must be built."""
        if not loader.indexed:
            return JSONResponse(
                status_code=503,
                content=ReadyResponse(ready=False).model_dump(),
            )
        index = loader.index
        return ReadyResponse(
            ready=True,
            components={platform.value: index.count(platform) for platform in Platform},
            warnings=[str(w) for w in index.warnings],
        )

    # ============ MCP ENDPOINTS ============

    @app.post("/mcp", tags=["MCP"])
    async def mcp_endpoint(request: Request):
        """MCP JSON-RPC endpoint (single messages and batches)."""
        try:
            body = json.loads(await request.body())
        except (json.JSONDecodeError, UnicodeDecodeError):
            return JSONResponse(jsonrpc_error(None, PARSE_ERROR, "Parse error"), status_code=400)

        if isinstance(body, list):
            responses = [r for r in [await handle_message(m, ctx) for m in body] if r is not None]
            return JSONResponse(responses) if responses else Response(status_code=204)

        response = await handle_message(body, ctx)
        return JSONResponse(response) if response else Response(status_code=204)

    @app.post("/v1/tools", response_model=ToolResult, tags=["MCP"])
    async def execute_tool_endpoint(request: MCPRequest) -> ToolResult:
        """Execute one tool directly, without JSON-RPC framing."""
        return await execute_tool(request.tool, request.params, ctx)

    return app


app = create_app()


# ============ MAIN ============


def main():
    """Run the server with uvicorn."""
    import uvicorn

    configure_logging()
    uvicorn.run(
        "magentaa11y_mcp.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
