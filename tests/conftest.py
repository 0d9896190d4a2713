import json
import os
import pytest
from unittest.mock import Mock
from managers.mercadopago_manager import MercadoPagoManager
from models.config import PreferenceSettings
from repository.preference import PreferenceGateway

SETTINGS_PATH = os.path.join(os.path.dirname(os.path.dirname(__file__)), "local.settings.json")


@pytest.fixture(autouse=True)
def load_env(monkeypatch):
    # local.settings.json があればValuesを環境変数として読み込む
    if os.path.exists(SETTINGS_PATH):
        with open(SETTINGS_PATH, "r") as f:
            values = json.load(f).get("Values", {})
        for key, value in values.items():
            monkeypatch.setenv(key, str(value))

    monkeypatch.setenv("MERCADOPAGO_ACCESS_TOKEN", "TEST-0000-token")
    monkeypatch.setenv("FRONT_URL", "https://shop.example")
    monkeypatch.delenv("BACK_URL_SUCCESS", raising=False)
    monkeypatch.delenv("BACK_URL_FAILURE", raising=False)
    monkeypatch.delenv("BACK_URL_PENDING", raising=False)
    monkeypatch.delenv("EXCLUDED_PAYMENT_TYPES", raising=False)
    MercadoPagoManager.reset()
    yield
    MercadoPagoManager.reset()


@pytest.fixture
def settings():
    return PreferenceSettings(
        access_token="TEST-0000-token",
        back_url_success="https://shop.example/success",
        back_url_failure="https://shop.example/failure",
        back_url_pending="https://shop.example/pending",
    )


@pytest.fixture
def fake_sdk():
    """preference().create() の戻り値を差し替えられるSDKのモック"""
    sdk = Mock()
    sdk.preference.return_value.create.return_value = {
        "status": 201,
        "response": {"id": "123", "init_point": "https://pay.example/123"},
    }
    return sdk


@pytest.fixture
def gateway(fake_sdk):
    return PreferenceGateway(fake_sdk)


@pytest.fixture
def widget_items():
    return [{"title": "Widget", "quantity": 2, "unit_price": 9.99}]
