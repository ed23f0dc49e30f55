"""
Error Handlers - Traduction des exceptions en reponses HTTP.

Responsabilite unique:
----------------------
Mapper les exceptions du domaine et les erreurs de validation
vers des reponses JSON {error, message} portant les en-tetes CORS.

Politique:
----------
- 400/401/403: message explicite (erreur de l'appelant)
- 500: message generique fixe, le detail reste dans les logs serveur
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import Match

from src.domain.exceptions import (
    DomainException,
    ForbiddenError,
    InvalidAmountError,
    InvalidBillingRequestError,
    InvalidCpfError,
    UnauthenticatedError,
)
from src.infrastructure.logging import get_logger


CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

BILLING_FAILED_ERROR = "Falha ao criar cobrança"
BILLING_FAILED_MESSAGE = "Não foi possível criar a cobrança. Tente novamente mais tarde."
METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed"

# Ordre d'affichage dans l'en-tete Allow
METHOD_ORDER = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

_CLIENT_ERRORS = {
    UnauthenticatedError: (status.HTTP_401_UNAUTHORIZED, "Não autenticado"),
    ForbiddenError: (status.HTTP_403_FORBIDDEN, "Acesso negado"),
    InvalidBillingRequestError: (status.HTTP_400_BAD_REQUEST, "Requisição inválida"),
    InvalidCpfError: (status.HTTP_400_BAD_REQUEST, "Requisição inválida"),
    InvalidAmountError: (status.HTTP_400_BAD_REQUEST, "Requisição inválida"),
}

logger = get_logger("api.errors")


def error_response(status_code: int, error: str, message: str, headers: dict | None = None) -> JSONResponse:
    """Construit une reponse {error, message} avec les en-tetes CORS."""
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message},
        headers={**CORS_HEADERS, **(headers or {})},
    )


def _format_validation_errors(exc: RequestValidationError) -> list[str]:
    """Liste lisible des champs invalides ("user_data.cpf: ...")."""
    errors = []
    for err in exc.errors():
        location = [str(part) for part in err.get("loc", ()) if part != "body"]
        field = ".".join(location) or "body"
        errors.append(f"{field}: {err.get('msg', 'invalide')}")
    return errors


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Schema invalide ou JSON illisible -> 400."""
    return domain_exception_handler(
        request, InvalidBillingRequestError(_format_validation_errors(exc))
    )


def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Exception du domaine -> code HTTP correspondant."""
    for exc_type, (status_code, error) in _CLIENT_ERRORS.items():
        if isinstance(exc, exc_type):
            headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
            logger.info("request_rejected", code=exc.code, status_code=status_code)
            return error_response(status_code, error, exc.message, headers)

    logger.error("request_error", code=exc.code, error=exc.message)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        BILLING_FAILED_ERROR,
        BILLING_FAILED_MESSAGE,
    )


def _allowed_methods(request: Request) -> str:
    """Methodes declarees sur le chemin demande ("POST, OPTIONS")."""
    methods = set()
    for route in request.app.router.routes:
        route_methods = getattr(route, "methods", None)
        if route_methods and route.matches(request.scope)[0] != Match.NONE:
            methods.update(route_methods)
    ordered = [m for m in METHOD_ORDER if m in methods]
    return ", ".join(ordered + sorted(methods - set(METHOD_ORDER)))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Erreurs de routage (404, 405) avec les en-tetes CORS.

    405: corps texte, Allow recalcule depuis les routes du chemin,
    le corps de la requete n'est pas lu.
    """
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return PlainTextResponse(
            METHOD_NOT_ALLOWED_MESSAGE,
            status_code=exc.status_code,
            headers={**CORS_HEADERS, "Allow": _allowed_methods(request)},
        )

    return error_response(
        exc.status_code,
        str(exc.detail),
        str(exc.detail),
        dict(exc.headers or {}),
    )


def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Erreur inattendue -> 500 generique, la trace reste dans les logs."""
    logger.error("unhandled_error", error=str(exc), error_type=type(exc).__name__, exc_info=exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        BILLING_FAILED_ERROR,
        BILLING_FAILED_MESSAGE,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Enregistre les handlers sur l'application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
