# app/core/exception_handlers.py
from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.utils.logger import logger


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    erros = []
    for err in exc.errors():
        campo = ".".join(str(p) for p in err.get("loc", []) if p != "body")
        erros.append({"campo": campo, "mensagem": err.get("msg"), "tipo": err.get("type")})
    logger.warning(f"[Validação] {request.method} {request.url.path} - {erros}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=jsonable_encoder({"detail": "Dados inválidos", "erros": erros}),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code >= 500:
        logger.error(f"[HTTP] {request.method} {request.url.path} - {exc.status_code}: {exc.detail}")
    else:
        logger.info(f"[HTTP] {request.method} {request.url.path} - {exc.status_code}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def general_exception_handler(request: Request, exc: Exception):
    logger.error(f"[Erro] {request.method} {request.url.path} - {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Erro interno do servidor"},
    )
