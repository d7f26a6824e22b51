# boards_frontend/handlers.py
# The "controller" layer: Gradio callbacks that read the board snapshot from the
# backend, keep state.py current, and turn the snapshot into component updates.

import gradio as gr
import pandas as pd
import datetime
import logging
import requests

from . import api_client
from . import state
from .config import config

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = ["看板", "图片数", "视频数", "错误"]

# --- UI Logic & Helper Functions ---

def resource_url(resource: dict, media_type: str, cloud_name: str, base_url: str = None) -> str:
    """
    Builds the delivery URL of a Cloudinary resource descriptor.
    Format: {base}/{cloud}/{media_type}/upload/v{version}/{public_id}.{format}
    The base defaults to the host reported by the backend, then to config.MEDIA_BASE_URL.
    """
    base_url = (base_url or state.MEDIA_BASE_URL or config.MEDIA_BASE_URL).rstrip('/')
    resource_type = resource.get("resource_type", media_type)
    delivery_type = resource.get("type", "upload")
    parts = [base_url, cloud_name, resource_type, delivery_type]
    if resource.get("version"):
        parts.append(f"v{resource['version']}")
    path = resource["public_id"]
    if resource.get("format"):
        path = f"{path}.{resource['format']}"
    parts.append(path)
    return "/".join(str(p) for p in parts)


def gallery_items(resources: list, media_type: str, cloud_name: str) -> list:
    """Converts resource descriptors into (url, caption) pairs for gr.Gallery."""
    if not cloud_name:
        return []
    return [(resource_url(r, media_type, cloud_name), r.get("public_id", "")) for r in resources if r.get("public_id")]


def boards_summary_dataframe(boards: list) -> pd.DataFrame:
    """Builds the summary table shown above the galleries."""
    if not boards:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    rows = [{
        "看板": b["name"],
        "图片数": len(b.get("images") or []),
        "视频数": len(b.get("videos") or []),
        "错误": b.get("error") or "",
    } for b in boards]
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def board_slot_updates(max_boards: int) -> list:
    """Returns 4 updates per board slot (group, title, image gallery, video gallery) from state.BOARDS."""
    if len(state.BOARDS) > max_boards:
        hidden = [b["name"] for b in state.BOARDS[max_boards:]]
        msg = f"看板数量超过显示上限 {max_boards}，以下看板未显示: {', '.join(hidden)}"
        logger.warning(msg)
        gr.Warning(msg)
    updates = []
    for i in range(max_boards):
        if i < len(state.BOARDS):
            board = state.BOARDS[i]
            updates.extend([
                gr.update(visible=True),
                gr.update(value=f"### 🗂️ {board['name']}"),
                gr.update(value=gallery_items(board.get("images") or [], "image", state.CLOUD_NAME)),
                gr.update(value=gallery_items(board.get("videos") or [], "video", state.CLOUD_NAME)),
            ])
        else:
            updates.extend([gr.update(visible=False), gr.update(), gr.update(value=[]), gr.update(value=[])])
    return updates


def _apply_snapshot(snapshot: dict):
    state.CLOUD_NAME = snapshot.get("cloud_name")
    state.BOARDS = snapshot.get("boards", [])
    state.LAST_LOADED_AT = snapshot.get("last_loaded_at")
    state.MEDIA_BASE_URL = snapshot.get("media_base_url")


def _format_loaded_at(value):
    if not value:
        return "尚未加载"
    try:
        dt_object = datetime.datetime.fromisoformat(value.replace('Z', '+00:00'))
        return dt_object.strftime('%Y-%m-%d %H:%M:%S %Z')
    except (ValueError, TypeError):
        return value

# --- Gradio Callback Handlers ---

def check_backend_status():
    """Callback to check backend status on load."""
    return api_client.check_backend()


def refresh_boards(max_boards: int):
    """Callback to fetch the current board snapshot and update every board component."""
    try:
        _apply_snapshot(api_client.get_boards())
        msg = f"✅ 看板已于 {datetime.datetime.now().strftime('%H:%M:%S')} 刷新 (云端数据加载时间: {_format_loaded_at(state.LAST_LOADED_AT)})。"
    except requests.RequestException as e:
        msg = f"🔴 获取看板失败: {e}"
        gr.Warning(msg)
    return [boards_summary_dataframe(state.BOARDS), msg] + board_slot_updates(max_boards)


def reload_from_cloudinary(max_boards: int):
    """Callback for the reload button: asks the backend to fetch every board again."""
    try:
        _apply_snapshot(api_client.reload_boards())
        failed = [b["name"] for b in state.BOARDS if b.get("error")]
        if failed:
            msg = f"🟡 部分看板加载失败: {', '.join(failed)}"
        else:
            msg = f"✅ 已于 {datetime.datetime.now().strftime('%H:%M:%S')} 从 Cloudinary 重新加载全部看板。"
    except requests.RequestException as e:
        detail = e
        if e.response is not None:
            try:
                detail = e.response.json().get('detail', e)
            except ValueError:
                pass
        msg = f"🔴 重新加载失败: {detail}"
        gr.Warning(msg)
    return [boards_summary_dataframe(state.BOARDS), msg] + board_slot_updates(max_boards)
