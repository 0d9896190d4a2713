from pydantic import BaseModel, Field
from typing import List, Dict, Any, Literal, TypedDict
from models.result import ErrorKind

AutoReturn = Literal['approved']


class LineItem(TypedDict, total=False):
    id: str  # 商品ID
    title: str  # 商品名
    description: str  # 商品説明
    picture_url: str  # 商品画像URL
    category_id: str  # カテゴリ
    quantity: int  # 数量（1以上）
    unit_price: float  # 単価（0より大きい）
    currency_id: str  # 通貨コード（例: BRL）


class CartRequest(BaseModel):
    # 呼び出し元の値をそのままプロバイダへ渡すため、dictのまま保持する
    items: List[Dict[str, Any]] = Field(..., min_length=1)


class ExcludedPaymentType(BaseModel):
    id: str


class PaymentMethods(BaseModel):
    excluded_payment_types: List[ExcludedPaymentType]


class BackUrls(BaseModel):
    success: str  # 支払い承認時のリダイレクトURL
    failure: str  # 支払い失敗時のリダイレクトURL
    pending: str  # 支払い保留時のリダイレクトURL


class PreferenceRequest(BaseModel):
    items: List[Dict[str, Any]]
    payment_methods: PaymentMethods
    payer: Dict[str, Any] = Field(default_factory=dict)
    back_urls: BackUrls
    auto_return: AutoReturn = 'approved'

    def to_body(self) -> Dict[str, Any]:
        return self.model_dump()


class PreferenceResult(BaseModel):
    preference_id: str = Field(alias="preferenceId")  # Mercado PagoのプリファレンスID
    init_point: str = Field(alias="initPoint")  # チェックアウトページのURL

    model_config = {
        "populate_by_name": True
    }


class CallableResponse(BaseModel):
    result: PreferenceResult


class CallableErrorBody(BaseModel):
    status: ErrorKind
    message: str


class CallableErrorResponse(BaseModel):
    error: CallableErrorBody
