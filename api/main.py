import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import Depends, FastAPI
from fastapi.responses import HTMLResponse, JSONResponse


# Load environment variables from .env file
PROJECT_ROOT = Path(__file__).parent.parent
ENV_FILE = PROJECT_ROOT / ".env"
load_dotenv(ENV_FILE)

from api.config import settings
from api.routers.api_v1.api import api_router
from api.services.collection_service import CollectionService, get_collection_service
from api.utils.errors import register_error_handlers
from goblet_contracts.types import MAX_GOBLET_SUPPLY


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

    Builds the collection service at startup so a bad administrator address
    fails fast.
    """
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(f"Environment: {settings.environment}, network: {settings.network}")

    service = get_collection_service()
    logger.info(
        f"Collection administrator {service.administrator}, "
        f"minting epoch {service.goblets.epoch}, goblet CID {service.goblets.cid}"
    )
    logger.info(f"API Documentation: http://127.0.0.1:{settings.api_port}/docs")

    yield  # Application runs here

    logger.info("Shutting down API")


app = FastAPI(
    title=settings.api_title,
    description=settings.api_description,
    version=settings.api_version,
    contact=settings.contact,
    lifespan=lifespan,
)

register_error_handlers(app)


@app.get("/")
async def root():
    """Basic HTML response."""
    body = (
        "<html>"
        "<body style='padding: 10px;'>"
        "<h1>Welcome to the Goblet Collection API</h1>"
        "<div>"
        "Check the docs: <a href='/docs'>here</a>"
        "</div>"
        "</body>"
        "</html>"
    )

    return HTMLResponse(content=body)


@app.get("/health")
async def health_check(service: CollectionService = Depends(get_collection_service)):
    """
    Health check endpoint.

    Returns:
        - status: "healthy" when the collections are loaded
        - collections: gemstone and goblet supply
        - api_version: API version
        - environment: Current environment
    """
    health_status = {
        "status": "healthy",
        "api_version": settings.api_version,
        "environment": settings.environment,
        "collections": {},
    }

    try:
        health_status["collections"] = {
            "goblets_minted": service.goblets.total_supply,
            "goblets_max_supply": MAX_GOBLET_SUPPLY,
            "minting_year_index": service.goblets.current_year_index(),
        }
        return JSONResponse(content=health_status, status_code=200)

    except Exception as e:
        logger.error(f"Health check failed: {str(e)}")
        health_status["status"] = "unhealthy"
        health_status["error"] = str(e)

        return JSONResponse(content=health_status, status_code=503)


app.include_router(api_router, prefix=settings.API_V1_STR)
