from typing import Optional
from threading import Lock
from models.config import PreferenceSettings
from repository.preference import PreferenceGateway
import mercadopago
import logging

logger = logging.getLogger(__name__)


class MercadoPagoManager:
    _instance: Optional['MercadoPagoManager'] = None
    _lock = Lock()
    settings: Optional[PreferenceSettings] = None
    sdk: Optional[mercadopago.SDK] = None

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    # シングルトンの初期化（トークン未設定の場合はValueError）
                    instance = super().__new__(cls)
                    instance.settings = PreferenceSettings.from_env()
                    instance.sdk = mercadopago.SDK(instance.settings.access_token)
                    cls._instance = instance
                    logger.info("Mercado Pagoクライアントを初期化しました")
        return cls._instance

    def __init__(self):
        pass

    def gateway(self) -> PreferenceGateway:
        return PreferenceGateway(self.sdk)

    @classmethod
    def reset(cls) -> None:
        with cls._lock:
            cls._instance = None
