from pathlib import Path
from contextlib import asynccontextmanager
import logging

from dotenv import load_dotenv
from fastapi import APIRouter, FastAPI
from fastapi.responses import HTMLResponse, JSONResponse


# Load environment variables from .env file
PROJECT_ROOT = Path(__file__).parent.parent
ENV_FILE = PROJECT_ROOT / ".env"
load_dotenv(ENV_FILE)

from api.config import imx_settings, settings
from api.dependencies.imx import close_imx_helper
from api.routers.api_v1.api import api_router
from imx_offchain.network import ImmutableXNetwork


# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Logs the resolved network on startup and closes cached sessions on shutdown.
    """
    network = ImmutableXNetwork(settings.imx_chain_id, imx_settings)

    # Startup
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Chain id: {settings.imx_chain_id} ({network.network or 'unsupported'})")
    if not network.is_supported:
        logger.warning("IMX_CHAIN_ID is not an Immutable X network, /api/v1 endpoints will fail")
    logger.info(f"API Documentation: http://127.0.0.1:{settings.api_port}/docs")

    yield  # Application runs here

    # Shutdown
    logger.info("Shutting down API")
    await close_imx_helper()


app = FastAPI(
    title=settings.api_title,
    description=settings.api_description,
    version=settings.api_version,
    lifespan=lifespan,
)

root_router = APIRouter()


@root_router.get("/")
async def root():
    """Basic HTML response."""
    body = (
        "<html>"
        "<body style='padding: 10px;'>"
        "<h1>Welcome to the Immutable X Bridge API</h1>"
        "<div>"
        "Check the docs: <a href='/docs'>here</a>"
        "</div>"
        "</body>"
        "</html>"
    )

    return HTMLResponse(content=body)


@root_router.get("/health")
async def health_check():
    """
    Health check endpoint reporting the configured network.

    Returns:
        - status: "healthy" if the chain id maps to an Immutable X network
        - network: resolved network information
        - api_version: API version
        - environment: Current environment
    """
    network = ImmutableXNetwork(settings.imx_chain_id, imx_settings)
    health_status = {
        "status": "healthy" if network.is_supported else "unhealthy",
        "api_version": settings.api_version,
        "environment": settings.environment,
        "network": network.get_network_info(),
    }

    return JSONResponse(content=health_status, status_code=200 if network.is_supported else 503)


app.include_router(root_router)
app.include_router(api_router, prefix=settings.API_V1_STR)
