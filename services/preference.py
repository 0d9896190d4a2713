from collections.abc import Mapping, Sequence
from typing import Any, Optional
from models.config import PreferenceSettings
from models.preference import (
    CartRequest,
    LineItem,
    PreferenceRequest,
    PreferenceResult,
    PaymentMethods,
    ExcludedPaymentType,
    BackUrls,
)
from models.result import Result
from repository.preference import PreferenceGateway
import logging

logger = logging.getLogger(__name__)

ITEMS_REQUIRED_MESSAGE = "関数は'items'の配列を指定して呼び出す必要があります。"
ITEM_NOT_OBJECT_MESSAGE = "'items'の各要素はオブジェクトである必要があります。"


def validate_cart(payload: Any) -> Result[CartRequest]:
    """itemsが空でない配列かどうかだけを確認する（商品内容の検証はMercado Pagoに任せる）"""
    items: Optional[Sequence[LineItem]] = payload.get("items") if isinstance(payload, Mapping) else None

    if (
        items is None
        or isinstance(items, (str, bytes, Mapping))
        or not isinstance(items, Sequence)
        or len(items) == 0
    ):
        return Result.failure('invalid-argument', ITEMS_REQUIRED_MESSAGE)

    if not all(isinstance(item, Mapping) for item in items):
        return Result.failure('invalid-argument', ITEM_NOT_OBJECT_MESSAGE)

    return Result.success(CartRequest(items=[dict(item) for item in items]))


def build_preference(cart: CartRequest, settings: PreferenceSettings) -> PreferenceRequest:
    return PreferenceRequest(
        items=cart.items,
        payment_methods=PaymentMethods(
            excluded_payment_types=[ExcludedPaymentType(id=t) for t in settings.excluded_payment_types]
        ),
        payer={},
        back_urls=BackUrls(
            success=settings.back_url_success,
            failure=settings.back_url_failure,
            pending=settings.back_url_pending,
        ),
        auto_return=settings.auto_return,
    )


async def create_payment_preference(
    payload: Any,
    settings: PreferenceSettings,
    gateway: PreferenceGateway,
) -> Result[PreferenceResult]:
    """
    カートからMercado Pagoのチェックアウトリンクを作成する
    - 検証 → プリファレンス構築 → API呼び出しの順に一方向に進む
    - どの段階で失敗してもその時点のエラーを返す
    """
    cart = validate_cart(payload)
    if not cart.ok:
        logger.info("不正なカート: %s", cart.error.message)
        return Result(error=cart.error)

    preference = build_preference(cart.value, settings)
    return await gateway.create_async(preference)
