# boards_backend/main.py

from fastapi import FastAPI
import httpx
import logging

from .api import boards
from .core.config import settings
from .core.logging_config import setup_logging
from .services.cloudinary_client import CloudinaryClient
from .storage.board_store import BoardStore

logger = logging.getLogger(__name__)


def create_app(app_settings=settings) -> FastAPI:
    app = FastAPI(
        title="Cloud Boards Service",
        description="按看板 (Cloudinary tag) 聚合图片与视频资源的后端服务。",
        version="1.0.0"
    )

    # 挂载 API 路由
    app.include_router(boards.router, prefix="/api", tags=["Boards"])

    # store 在创建应用时即存在，看板内容为空，直到第一次 load 完成
    app.state.settings = app_settings
    app.state.board_store = BoardStore(app_settings.BOARD_NAMES)
    app.state.http_client = None
    app.state.cloudinary_client = None

    @app.on_event("startup")
    async def startup_event():
        """应用启动时，初始化日志、创建 HTTP 会话，并按配置加载一次看板。"""
        setup_logging()
        logger.info("Application startup sequence initiated.")

        app.state.http_client = httpx.AsyncClient()
        try:
            app.state.cloudinary_client = CloudinaryClient(
                app_settings.CLOUDINARY_CLOUD_NAME,
                app.state.http_client,
                base_url=app_settings.CLOUDINARY_BASE_URL,
                timeout=app_settings.REQUEST_TIMEOUT,
            )
        except ValueError as e:
            logger.error(f"{e} 看板将保持为空。")
            return

        if app_settings.LOAD_ON_STARTUP:
            try:
                await app.state.board_store.load(
                    app.state.cloudinary_client,
                    concurrency=app_settings.LOAD_CONCURRENCY,
                    stop_on_error=app_settings.STOP_ON_ERROR,
                )
            except (httpx.HTTPError, ValueError) as e:
                logger.error(f"Initial board load failed: {e}", exc_info=True)
        logger.info("Application startup sequence completed.")

    @app.on_event("shutdown")
    async def shutdown_event():
        """应用关闭时，关闭共享的 HTTP 会话。"""
        logger.info("Application shutdown sequence initiated.")
        if app.state.http_client is not None:
            await app.state.http_client.aclose()
        logger.info("Application shutdown sequence completed.")

    @app.get("/", tags=["Root"])
    def read_root():
        return {"message": "Welcome to Cloud Boards Backend API. Visit /docs for API documentation."}

    return app


app = create_app()
