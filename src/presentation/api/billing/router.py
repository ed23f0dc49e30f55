"""
Billing Router - Endpoints de facturation.

Responsabilite unique:
----------------------
Exposer la creation de cobranca AbacatePay et le statut d'assinatura.

Endpoints:
----------
- POST /billing/create-abacatepay-billing: Creer la cobranca mensuelle
- OPTIONS /billing/create-abacatepay-billing: Preflight CORS
- GET /billing/subscription: Statut de l'assinatura

Les autres methodes recoivent un 405 du routeur (voir errors.py).
"""

from fastapi import APIRouter, Depends, Response, status

from src.application.use_cases.billing import CreateBillingUseCase
from src.domain.exceptions import ForbiddenError
from src.domain.ports.subscription_repository import SubscriptionRepository
from src.presentation.api.billing.schemas import (
    BillingRequest,
    CreateBillingResponse,
    ErrorResponse,
    PaymentResponse,
    SubscriptionResponse,
    SubscriptionStatus,
)
from src.presentation.api.config import APISettings, get_settings
from src.presentation.api.dependencies import (
    get_create_billing_use_case,
    get_current_user_id,
    get_subscription_repository,
)
from src.presentation.api.errors import CORS_HEADERS


BILLING_PATH = "/create-abacatepay-billing"
SUCCESS_MESSAGE = "Cobrança criada com sucesso"

router = APIRouter(prefix="/billing", tags=["Billing"])


@router.options(BILLING_PATH, include_in_schema=False)
def billing_preflight():
    """Preflight CORS: 200, corps vide."""
    return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)


@router.post(
    BILLING_PATH,
    response_model=CreateBillingResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Creer une cobranca AbacatePay",
    description="Cree la cobranca PIX mensuelle et retourne l'URL de paiement.",
)
def create_abacatepay_billing(
    data: BillingRequest,
    response: Response,
    user_id: str = Depends(get_current_user_id),
    use_case: CreateBillingUseCase = Depends(get_create_billing_use_case),
    settings: APISettings = Depends(get_settings),
):
    """
    Cree une cobranca pour l'utilisateur authentifie.

    Returns:
        billing_id et redirect_url de la page de paiement.
    """
    if data.user_id != user_id:
        raise ForbiddenError(user_id, data.user_id)

    order = data.to_order(
        allow_placeholder_tax_id=not settings.reject_placeholder_tax_id
    )
    result = use_case.execute(order)

    response.headers.update(CORS_HEADERS)
    return CreateBillingResponse(
        billing_id=result.billing_id,
        redirect_url=result.redirect_url,
        message=SUCCESS_MESSAGE,
    )


@router.get(
    "/subscription",
    response_model=SubscriptionResponse,
    summary="Statut de l'assinatura",
)
def get_subscription(
    response: Response,
    user_id: str = Depends(get_current_user_id),
    repository: SubscriptionRepository = Depends(get_subscription_repository),
):
    """
    Retourne l'assinatura enregistree de l'utilisateur.

    Returns:
        Statut active/pending, ou none sans assinatura, et l'historique
        des pagamentos.
    """
    response.headers.update(CORS_HEADERS)

    payments = [
        PaymentResponse.model_validate(p) for p in repository.find_payments(user_id)
    ]
    subscription = repository.get_subscription(user_id)
    if subscription is None:
        return SubscriptionResponse(status=SubscriptionStatus.NONE, pagamentos=payments)

    return SubscriptionResponse(
        status=(
            SubscriptionStatus.ACTIVE
            if subscription.assinatura_ativa
            else SubscriptionStatus.PENDING
        ),
        assinatura_id=subscription.assinatura_id,
        data_assinatura=subscription.data_assinatura,
        proximo_pagamento=subscription.proximo_pagamento,
        assinatura_ativa=subscription.assinatura_ativa,
        pagamentos=payments,
    )
