# boards_backend/api/boards.py
from fastapi import APIRouter, Request, HTTPException
import httpx
import logging

from ..services.cloudinary_client import CloudinaryClient, MalformedResponseError
from ..storage.board_store import BoardStore, BoardNotFoundError

router = APIRouter()
logger = logging.getLogger(__name__)


def _get_store(request: Request) -> BoardStore:
    return request.app.state.board_store


def _get_client(request: Request) -> CloudinaryClient:
    client = getattr(request.app.state, "cloudinary_client", None)
    if client is None:
        raise HTTPException(status_code=503, detail="Cloudinary 未配置：请在 .env 中设置 CLOUDINARY_CLOUD_NAME。")
    return client


def _snapshot(request: Request) -> dict:
    store = _get_store(request)
    client = getattr(request.app.state, "cloudinary_client", None)
    return {
        "status": "success",
        "cloud_name": client.cloud_name if client else None,
        "media_base_url": client.base_url if client else None,
        "last_loaded_at": store.last_loaded_at.isoformat() if store.last_loaded_at else None,
        "boards": store.to_list(),
    }


@router.get("/boards")
def get_all_boards(request: Request):
    """
    获取全部看板及其图片、视频资源，按看板声明顺序返回。
    前端将调用此接口来渲染看板。
    """
    return _snapshot(request)


@router.get("/boards/{name}")
def get_board(name: str, request: Request):
    """获取单个看板。"""
    try:
        board = _get_store(request).get(name)
    except BoardNotFoundError:
        raise HTTPException(status_code=404, detail=f"看板 '{name}' 不存在。")
    return {"status": "success", "board": board.to_dict()}


@router.post("/boards/load")
async def load_boards(request: Request):
    """从 Cloudinary 重新加载所有看板的图片和视频列表。"""
    client = _get_client(request)
    store = _get_store(request)
    settings = request.app.state.settings
    try:
        await store.load(client, concurrency=settings.LOAD_CONCURRENCY, stop_on_error=settings.STOP_ON_ERROR)
    except httpx.HTTPStatusError as http_err:
        detail = f"Cloudinary 返回错误: {http_err.response.status_code} ({http_err.request.url})"
        logger.error(detail)
        raise HTTPException(status_code=502, detail=detail)
    except httpx.RequestError as req_err:
        detail = f"无法连接到 Cloudinary: {req_err}"
        logger.error(detail)
        raise HTTPException(status_code=502, detail=detail)
    except MalformedResponseError as e:
        logger.error(str(e))
        raise HTTPException(status_code=502, detail=str(e))
    return _snapshot(request)
