import pytest
from unittest.mock import patch
from managers.mercadopago_manager import MercadoPagoManager
from repository.preference import PreferenceGateway


def test_singleton():
    with patch("managers.mercadopago_manager.mercadopago.SDK") as sdk_cls:
        first = MercadoPagoManager()
        second = MercadoPagoManager()

    assert first is second
    sdk_cls.assert_called_once_with("TEST-0000-token")
    assert first.sdk is sdk_cls.return_value
    assert first.settings.back_url_success == "https://shop.example/success"


def test_gateway_shares_client():
    with patch("managers.mercadopago_manager.mercadopago.SDK") as sdk_cls:
        manager = MercadoPagoManager()
        gateway = manager.gateway()

    assert isinstance(gateway, PreferenceGateway)
    assert gateway.sdk is sdk_cls.return_value


def test_missing_token_is_fatal(monkeypatch):
    monkeypatch.delenv("MERCADOPAGO_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("AZURE_KEY_VAULT_URL", raising=False)
    with pytest.raises(ValueError):
        MercadoPagoManager()
    # 初期化に失敗した場合はインスタンスを保持しない
    assert MercadoPagoManager._instance is None
