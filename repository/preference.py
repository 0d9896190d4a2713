from fastapi.concurrency import run_in_threadpool
from models.preference import PreferenceRequest, PreferenceResult
from models.result import Result
from typing import Any, Dict
import mercadopago
import logging

logger = logging.getLogger(__name__)


class PreferenceGateway:
    """Mercado Pagoのプリファレンス作成APIを1回だけ呼び出す"""

    def __init__(self, sdk: mercadopago.SDK):
        self.sdk = sdk

    def create(self, preference: PreferenceRequest) -> Result[PreferenceResult]:
        try:
            response = self.sdk.preference().create(preference.to_body())
        except Exception:
            logger.exception("Mercado Pagoへのプリファレンス作成リクエストに失敗しました")
            return Result.internal()

        if not isinstance(response, dict):
            logger.error("Mercado Pagoのレスポンス形式が不正です: %r", response)
            return Result.internal()

        status = response.get("status")
        body = response.get("response")
        if not isinstance(status, int) or not 200 <= status < 300:
            logger.error("Mercado Pagoがエラーを返しました: status=%s body=%s", status, body)
            return Result.internal()

        return self._to_result(body)

    async def create_async(self, preference: PreferenceRequest) -> Result[PreferenceResult]:
        # SDKは同期I/Oのため、スレッドプールで待機する
        return await run_in_threadpool(self.create, preference)

    def _to_result(self, body: Any) -> Result[PreferenceResult]:
        if not isinstance(body, dict):
            logger.error("Mercado Pagoのレスポンス本文が不正です: %r", body)
            return Result.internal()

        preference_id = body.get("id")
        init_point = body.get("init_point")
        if not isinstance(preference_id, str) or not preference_id:
            logger.error("レスポンスにidがありません: %s", _summary(body))
            return Result.internal()
        if not isinstance(init_point, str) or not init_point:
            logger.error("レスポンスにinit_pointがありません: %s", _summary(body))
            return Result.internal()

        logger.info("プリファレンスを作成しました: %s", preference_id)
        return Result.success(PreferenceResult(preference_id=preference_id, init_point=init_point))


def _summary(body: Dict[str, Any]) -> Dict[str, Any]:
    return {k: body.get(k) for k in ("id", "init_point", "sandbox_init_point", "status", "message")}
