import fastapi
import logging
from contextlib import asynccontextmanager
from fastapi import Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from managers.mercadopago_manager import MercadoPagoManager
from models.config import cors_origins
from models.result import CallableException, Result
from . import connection, preference

# ログ設定
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: fastapi.FastAPI):
    # 起動時にクライアントを初期化（トークン未設定なら起動失敗）
    MercadoPagoManager()
    yield


app = fastapi.FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(CallableException)
async def callable_exception_handler(request: Request, exc: CallableException):
    return JSONResponse(status_code=exc.status_code, content=exc.error.to_envelope())


@app.exception_handler(Exception)
async def unexpected_exception_handler(request: Request, exc: Exception):
    logger.exception("予期しないエラー: %s", request.url.path)
    error = Result.internal().error
    return JSONResponse(status_code=error.status_code, content=error.to_envelope())


app.include_router(connection.router)
app.include_router(preference.router)
