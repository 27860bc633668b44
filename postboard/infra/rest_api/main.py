import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from tortoise import Tortoise

from postboard.infra.config import Settings
from postboard.infra.logging_config import LoggingMiddleware, get_logger
from postboard.infra.tortoise_client.config import build_tortoise_config

from .routers.users import router as users_router
from .routers.posts import router as posts_router
from .error_handlers import handle_generic_error

VERSION = "0.1.0"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()
    # 本番環境では適切なログレベルを設定する
    log_level = logging.INFO if settings.environment == "production" else logging.DEBUG
    logger = get_logger("postboard", level=log_level)

    app = FastAPI(
        title="Postboard API",
        version=VERSION
    )
    app.state.settings = settings

    app.add_middleware(LoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(users_router, prefix=settings.api_prefix)
    app.include_router(posts_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event():
        """アプリケーション起動時の初期化処理"""
        logger.info("Application starting up", extra={"environment": settings.environment})

        await Tortoise.init(config=build_tortoise_config(settings.database_url))
        if settings.generate_schemas:
            await Tortoise.generate_schemas(safe=True)
        logger.info("Tortoise ORM initialized")

    @app.on_event("shutdown")
    async def shutdown_event():
        """アプリケーション終了時のクリーンアップ"""
        await Tortoise.close_connections()
        logger.info("Application shutdown complete")

    @app.get(f"{settings.api_prefix}/health")
    async def health_check():
        """ヘルスチェックエンドポイント"""
        return {"status": "healthy", "version": VERSION}

    # 分類済みエラーは各ルートで処理されるため、ここに届くのは想定外の例外のみ
    app.add_exception_handler(Exception, handle_generic_error)

    return app


app = create_app()

#uvicorn postboard.infra.rest_api.main:app --reload
