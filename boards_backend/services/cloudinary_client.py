# boards_backend/services/cloudinary_client.py
import httpx

IMAGE = "image"
VIDEO = "video"

LIST_URL_TEMPLATE = "{base_url}/{cloud_name}/{media_type}/list/{board_name}.json"


class MalformedResponseError(ValueError):
    """Cloudinary 返回的列表数据不是包含 'resources' 列表的 JSON 对象。"""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Malformed list response from {url}: {reason}")
        self.url = url


class CloudinaryClient:
    """
    Cloudinary 公开列表接口 (list by tag) 的异步客户端。

    列表接口按 tag 返回资源，本项目中 tag 即看板名称：
        GET {base_url}/{cloud_name}/image/list/{board_name}.json
        GET {base_url}/{cloud_name}/video/list/{board_name}.json
    响应体形如 {"resources": [...], "updated_at": "..."}。

    HTTP 会话 (httpx.AsyncClient) 由调用方注入并负责关闭，客户端本身不持有连接。
    所有网络错误、非 2xx 状态码和格式错误都会直接抛给调用方。
    """

    def __init__(self, cloud_name: str, http_client: httpx.AsyncClient,
                 base_url: str = "http://res.cloudinary.com", timeout: float = 60):
        if not cloud_name:
            raise ValueError("CLOUDINARY_CLOUD_NAME 未设置，无法访问 Cloudinary 列表接口！")
        self.cloud_name = cloud_name
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._http = http_client

    def list_url(self, media_type: str, board_name: str) -> str:
        return LIST_URL_TEMPLATE.format(
            base_url=self.base_url,
            cloud_name=self.cloud_name,
            media_type=media_type,
            board_name=board_name,
        )

    def image_list_url(self, board_name: str) -> str:
        return self.list_url(IMAGE, board_name)

    def video_list_url(self, board_name: str) -> str:
        return self.list_url(VIDEO, board_name)

    async def get_json(self, url: str):
        """Sends a GET request and returns the decoded JSON body. Non-2xx raises httpx.HTTPStatusError."""
        response = await self._http.get(url, timeout=self.timeout)
        response.raise_for_status()
        try:
            return response.json()
        except ValueError:
            raise MalformedResponseError(url, "body is not valid JSON")


def extract_resources(url: str, body) -> list:
    """Returns the 'resources' field of a list response, unmodified."""
    if not isinstance(body, dict):
        raise MalformedResponseError(url, f"expected a JSON object, got {type(body).__name__}")
    resources = body.get("resources")
    if not isinstance(resources, list):
        raise MalformedResponseError(url, "missing 'resources' list")
    return resources
