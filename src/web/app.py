"""
Application FastAPI de Comptoirs.

Initialise l'application web avec le Container DI, monte les routes
et traduit les erreurs metier en reponses HTTP :
- NotFoundError -> 404
- ValidationError -> 422
- BusinessRuleError -> 409

Les parametres de requete mal formes recoivent le meme corps d'erreur (422).
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from .. import __version__
from ..container import Container
from ..core.exceptions import (
    BusinessRuleError,
    ComptoirsError,
    NotFoundError,
    ValidationError,
)
from .routes.orders import router as orders_router

_STATUS_BY_ERROR = (
    (NotFoundError, 404),
    (ValidationError, 422),
    (BusinessRuleError, 409),
)


async def comptoirs_error_handler(request: Request, exc: ComptoirsError) -> JSONResponse:
    """Traduit une erreur metier en reponse JSON."""
    status_code = next(
        (code for error_cls, code in _STATUS_BY_ERROR if isinstance(exc, error_cls)),
        400,
    )
    logger.info(f"{request.method} {request.url.path} -> {status_code} : {exc}")
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.kind, "detail": str(exc)},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Renvoie les erreurs de validation FastAPI dans le format des erreurs metier."""
    detail = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    logger.info(f"{request.method} {request.url.path} -> 422 : {detail}")
    return JSONResponse(
        status_code=422,
        content={"error": ValidationError.kind, "detail": detail},
    )


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application.

    Args:
        container: Container a utiliser (un Container par defaut sinon)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialise la base au démarrage et libere la ressource à l'arrêt."""
        app.state.container = container or Container()
        app.state.container.database.init()
        yield
        app.state.container.database.shutdown()

    app = FastAPI(title="Comptoirs", version=__version__, lifespan=lifespan)
    app.include_router(orders_router)
    app.add_exception_handler(ComptoirsError, comptoirs_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    return app


app = create_app()
