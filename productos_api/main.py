import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.v1 import productos
from .config import settings
from .logging_config import setup_logging
from .services import Dispatcher, DispatcherError, build_dispatcher

logger = logging.getLogger("productos_api.main")


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # el binding del modelo responde 400, no 422
    logger.warning(
        "request validation failed | method=%s | path=%s | errors=%s",
        request.method,
        request.url.path,
        len(exc.errors()),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": jsonable_encoder(exc.errors()),
            "message": "Error de validación en la solicitud. Revisa campos, tipos y valores.",
        },
    )


async def dispatcher_exception_handler(request: Request, exc: DispatcherError):
    logger.error(
        "dispatcher error | method=%s | path=%s | err=%s",
        request.method,
        request.url.path,
        str(exc),
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


def create_app(dispatcher: Optional[Dispatcher] = None) -> FastAPI:
    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        debug=settings.debug,
    )

    if dispatcher is None:
        dispatcher = build_dispatcher(settings.handlers_module)
    app.state.dispatcher = dispatcher

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(DispatcherError, dispatcher_exception_handler)

    app.include_router(productos.router)
    return app


setup_logging(settings.log_level)

app = create_app()
logger.info("Application started")
logger.info("CORS origins: %s", settings.cors_allow_origins)
