import asyncio
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from homebid.core.config import settings
from homebid.core.database import DatabaseManager
from homebid.api.routes import (
    auth_router, properties_router, bids_router,
    visits_router, favorites_router, user_router
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting up {settings.app_name} v{settings.version}...")

    db = DatabaseManager()
    await db.init()

    try:
        yield
    finally:
        logger.info("Shutting down...")
        await db.close()

app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    lifespan=lifespan,
    debug=settings.debug
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request", "errors": jsonable_encoder(exc.errors())}
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"}
    )


@app.get("/health")
async def health_check():
    return {"status": "healthy"}

app.include_router(
    auth_router,
    prefix="/api",
    tags=["Auth"]
)

app.include_router(
    properties_router,
    prefix="/api/properties",
    tags=["Properties"]
)

app.include_router(
    bids_router,
    prefix="/api/properties",
    tags=["Bids"]
)

app.include_router(
    visits_router,
    prefix="/api/properties",
    tags=["Visits"]
)

app.include_router(
    favorites_router,
    prefix="/api/properties",
    tags=["Favorites"]
)

app.include_router(
    user_router,
    prefix="/api/user",
    tags=["User"]
)


async def main():
    """ Main function to run FastAPI with uvicorn. """
    config = uvicorn.Config(
        "homebid.main:app",
        host=settings.host,
        port=settings.port,
        workers=settings.workers,
        reload=settings.debug
    )
    server = uvicorn.Server(config)
    await server.serve()

if __name__ == "__main__":
    asyncio.run(main())
