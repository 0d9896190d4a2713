from pydantic import BaseModel, Field, field_validator
from typing import List, Optional, Tuple, Literal
from azure.identity import DefaultAzureCredential
from azure.keyvault.secrets import SecretClient
import logging
import os

logger = logging.getLogger(__name__)

# ボレート・宝くじ払いは常に除外する
TICKET_PAYMENT_TYPE = "ticket"
DEFAULT_FRONT_URL = "http://localhost:5173"


def _split_env(value: Optional[str]) -> List[str]:
    return [v.strip() for v in (value or "").split(",") if v.strip()]


def read_access_token() -> str:
    """
    Mercado Pagoのアクセストークンを取得する
    - MERCADOPAGO_ACCESS_TOKEN が設定されていればそれを使う
    - なければ AZURE_KEY_VAULT_URL のKey Vaultからシークレットを取得する
    """
    token = os.getenv("MERCADOPAGO_ACCESS_TOKEN")
    if token:
        return token.strip()

    vault_url = os.getenv("AZURE_KEY_VAULT_URL")
    if not vault_url:
        raise ValueError("MERCADOPAGO_ACCESS_TOKEN環境変数が設定されていません")

    secret_name = os.getenv("MERCADOPAGO_TOKEN_SECRET_NAME", "mercadopago-access-token")
    client = SecretClient(vault_url=vault_url, credential=DefaultAzureCredential())
    secret = client.get_secret(secret_name)
    if not secret.value:
        raise ValueError(f"Key Vaultのシークレット {secret_name} が空です")
    logger.info("Key Vaultからアクセストークンを取得しました: %s", secret_name)
    return secret.value.strip()


class PreferenceSettings(BaseModel):
    access_token: str = Field(..., min_length=1, repr=False)
    back_url_success: str
    back_url_failure: str
    back_url_pending: str
    excluded_payment_types: Tuple[str, ...] = (TICKET_PAYMENT_TYPE,)
    auto_return: Literal['approved'] = 'approved'

    model_config = {
        "frozen": True
    }

    @field_validator("excluded_payment_types")
    @classmethod
    def include_ticket(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if TICKET_PAYMENT_TYPE in value:
            return value
        return (TICKET_PAYMENT_TYPE, *value)

    @classmethod
    def from_env(cls) -> "PreferenceSettings":
        front_url = (os.getenv("FRONT_URL") or DEFAULT_FRONT_URL).rstrip("/")
        return cls(
            access_token=read_access_token(),
            back_url_success=os.getenv("BACK_URL_SUCCESS", f"{front_url}/success"),
            back_url_failure=os.getenv("BACK_URL_FAILURE", f"{front_url}/failure"),
            back_url_pending=os.getenv("BACK_URL_PENDING", f"{front_url}/pending"),
            excluded_payment_types=tuple(_split_env(os.getenv("EXCLUDED_PAYMENT_TYPES"))),
        )


def cors_origins() -> List[str]:
    origins = _split_env(os.getenv("CORS_ORIGINS"))
    return origins or [DEFAULT_FRONT_URL, "http://localhost:4173"]
