from fastapi import APIRouter, Depends, Request
from models.config import PreferenceSettings
from models.preference import CallableResponse, CallableErrorResponse
from models.result import CallableError, CallableException
from managers.mercadopago_manager import MercadoPagoManager
from repository.preference import PreferenceGateway
from services import preference as preference_service

router = APIRouter()

INVALID_ENVELOPE_MESSAGE = "リクエストは{\"data\": {...}}形式のJSONである必要があります。"


def get_preference_settings() -> PreferenceSettings:
    return MercadoPagoManager().settings


def get_preference_gateway() -> PreferenceGateway:
    return MercadoPagoManager().gateway()


@router.post(
    "/createPaymentPreference",
    response_model=CallableResponse,
    responses={400: {"model": CallableErrorResponse}, 500: {"model": CallableErrorResponse}},
    tags=["payments"],
)
async def create_payment_preference(
    request: Request,
    settings: PreferenceSettings = Depends(get_preference_settings),
    gateway: PreferenceGateway = Depends(get_preference_gateway),
):
    """カートの商品からMercado Pagoの支払いリンクを作成する"""
    try:
        body = await request.json()
    except ValueError:
        raise CallableException(CallableError(kind='invalid-argument', message=INVALID_ENVELOPE_MESSAGE))

    if not isinstance(body, dict) or "data" not in body:
        raise CallableException(CallableError(kind='invalid-argument', message=INVALID_ENVELOPE_MESSAGE))

    result = await preference_service.create_payment_preference(body["data"], settings, gateway)
    if not result.ok:
        raise CallableException(result.error)

    return CallableResponse(result=result.value)
