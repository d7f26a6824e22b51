# boards_frontend/api_client.py
# Encapsulates all HTTP requests to the boards backend. Network-level errors
# surface as requests.RequestException and are handled by the callers in handlers.py.

import requests

from .config import config

# Reloading touches every board on Cloudinary, so it gets a longer timeout.
LOAD_TIMEOUT = 180


def check_backend():
    """Checks the backend service status."""
    try:
        response = requests.get(config.ROOT_URL, timeout=2)
        if response.status_code == 200:
            return "🟢 后端服务正常"
        return f"🟡 后端服务异常 (状态码: {response.status_code})"
    except requests.ConnectionError:
        return "🔴 后端服务未连接"


def get_boards():
    """Fetches the board snapshot: {"cloud_name", "last_loaded_at", "boards"}."""
    response = requests.get(config.BOARDS_URL, timeout=10)
    response.raise_for_status()
    return response.json()


def reload_boards():
    """Asks the backend to reload every board from Cloudinary and returns the new snapshot."""
    response = requests.post(config.LOAD_BOARDS_URL, timeout=LOAD_TIMEOUT)
    response.raise_for_status()
    return response.json()
