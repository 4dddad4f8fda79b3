"""FastAPI application for the Dexterity backend"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from config.logging import setup_logging
from dexterity import __version__
from dexterity.contracts import DeploymentManifest, bind_dexterity
from dexterity.errors import DexterityError, ErrorKind, public_message
from .routes import router

# Setup logging
logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""

    logger.info("Starting Dexterity backend")

    # Manifest or artifact errors abort startup; nothing can be served without them
    manifest = DeploymentManifest.from_file(settings.DEPLOYMENT_MANIFEST_PATH)
    app.state.manifest = manifest
    app.state.dexterity_client = bind_dexterity(settings, manifest)

    logger.info(f"Listening on {settings.PORT}")

    yield

    logger.info("Shutting down Dexterity backend")


# Create FastAPI app
app = FastAPI(
    title="Dexterity backend",
    description="Read-only view of Dexterity pools, swaps, traders and holders",
    version=__version__,
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.ENVIRONMENT == "development" else settings.ALLOWED_ORIGINS,
    allow_methods=["GET"],
    allow_headers=["*"],
)


def _error_body(kind: ErrorKind, exc: Exception) -> dict:
    body = {"error": kind.value, "detail": public_message(kind)}
    if settings.EXPOSE_ERROR_DETAILS:
        body["debug"] = str(exc)
    return body


# Exception handlers
@app.exception_handler(DexterityError)
async def dexterity_error_handler(request: Request, exc: DexterityError):
    logger.error(f"{request.method} {request.url.path} failed ({exc.kind.value}): {exc}")
    return JSONResponse(status_code=500, content=_error_body(exc.kind, exc))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=500, content=_error_body(ErrorKind.INTERNAL, exc))


# Include routers
app.include_router(router)
