from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from typing import Iterable, Optional
import uvicorn

from app.core.config import settings
from app.core.logging import setup_logging
from app.core.responses import NewlineJSONResponse, NewlinePlainTextResponse
from app.dao.product_store import ProductStore
from app.middleware.logging_middleware import LoggingMiddleware
from app.models.product import Product
from app.controllers import product_controller

logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Application startup",
        environment=settings.environment,
        product_count=app.state.product_store.count()
    )
    yield
    logger.info("Application shutdown")


def _error_response(status_code: int, message: str, **extra) -> NewlineJSONResponse:
    return NewlineJSONResponse(
        status_code=status_code,
        content={
            "message": message,
            "success": False,
            "status_code": status_code,
            **extra
        }
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.warning(
        "HTTP Exception",
        status_code=exc.status_code,
        detail=exc.detail,
        path=request.url.path,
        method=request.method
    )
    return _error_response(exc.status_code, exc.detail)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = jsonable_encoder(exc.errors())
    logger.warning(
        "Invalid request",
        errors=errors,
        path=request.url.path,
        method=request.method
    )
    return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request", errors=errors)


async def general_exception_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled Exception",
        error=str(exc),
        path=request.url.path,
        method=request.method
    )
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app(products: Optional[Iterable[Product]] = None) -> FastAPI:
    """Build the application around its own product store.

    The store is seeded with the default products unless ``products`` is
    given, in which case it holds exactly those.
    """
    app = FastAPI(
        title="Product Inventory API",
        description="In-memory CRUD over named product quantities",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
    )

    app.state.product_store = ProductStore.seeded() if products is None else ProductStore(products)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if settings.request_logging:
        app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(product_controller.router, prefix=settings.api_prefix)

    @app.api_route(
        "/",
        methods=["GET", "HEAD", "OPTIONS", "POST", "PUT", "PATCH", "DELETE"],
        response_class=NewlinePlainTextResponse
    )
    async def root():
        return "Hello world"

    @app.get("/health", response_class=NewlineJSONResponse)
    async def health_check(request: Request):
        return {
            "status": "healthy",
            "environment": settings.environment,
            "product_count": request.app.state.product_store.count()
        }

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "local",
        log_config=None
    )
