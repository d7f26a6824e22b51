# boards_backend/storage/board_store.py
import asyncio
import datetime
import logging
from dataclasses import dataclass, field
from typing import Optional

from ..services.cloudinary_client import CloudinaryClient, extract_resources

logger = logging.getLogger(__name__)

DEFAULT_BOARD_NAMES = ("cars", "houses", "vacation")


class BoardNotFoundError(KeyError):
    """请求的看板名称不在 store 中。"""


@dataclass
class Board:
    """
    一个看板：以 Cloudinary tag 命名的一组图片和视频。
    images / videos 中的资源描述直接来自 Cloudinary，不做任何修改。
    """
    name: str
    images: list = field(default_factory=list)
    videos: list = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return {"name": self.name, "images": self.images, "videos": self.videos, "error": self.error}


class BoardStore:
    """
    内存中的看板存储。

    看板集合在构造时确定，运行期间不会增删；插入顺序即展示顺序。
    store 实例由宿主应用创建并持有 (见 main.py 的 startup)，只有 load() 会修改看板内容。
    """

    def __init__(self, board_names=DEFAULT_BOARD_NAMES):
        names = list(board_names)
        if len(set(names)) != len(names):
            raise ValueError(f"看板名称不能重复: {names}")
        self._boards = [Board(name=name) for name in names]
        self.last_loaded_at: Optional[datetime.datetime] = None

    @property
    def boards(self) -> list:
        return self._boards

    @property
    def names(self) -> list:
        return [board.name for board in self._boards]

    def get(self, name: str) -> Board:
        for board in self._boards:
            if board.name == name:
                return board
        raise BoardNotFoundError(name)

    def to_list(self) -> list:
        return [board.to_dict() for board in self._boards]

    async def load(self, client: CloudinaryClient, concurrency: int = 1, stop_on_error: bool = True):
        """
        Fetches images and videos for every board and replaces their lists in place.

        With concurrency=1 boards are loaded strictly one after another, images
        before videos. Larger values load up to that many boards at once; each
        board still requests images before videos, and the first failure
        cancels the boards that are still pending.

        Failures propagate unless stop_on_error is False, in which case the
        error is logged, recorded on the board and the remaining boards are loaded.
        """
        logger.info(f"Loading {len(self._boards)} boards from cloud '{client.cloud_name}' (concurrency={concurrency}).")
        if concurrency <= 1:
            for board in self._boards:
                await self._load_board_guarded(client, board, stop_on_error)
        else:
            semaphore = asyncio.Semaphore(concurrency)

            async def _bounded(board):
                async with semaphore:
                    await self._load_board_guarded(client, board, stop_on_error)

            tasks = [asyncio.create_task(_bounded(board)) for board in self._boards]
            try:
                await asyncio.gather(*tasks)
            except BaseException:
                # the first failure stops the pass: queued and in-flight boards are cancelled
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise

        self.last_loaded_at = datetime.datetime.now(datetime.timezone.utc)
        logger.info("All boards loaded.")

    async def _load_board_guarded(self, client: CloudinaryClient, board: Board, stop_on_error: bool):
        if stop_on_error:
            await self._load_board(client, board)
            return
        try:
            await self._load_board(client, board)
        except Exception as e:
            board.error = f"{type(e).__name__}: {e}"
            logger.error(f"Failed to load board '{board.name}': {e}", exc_info=True)

    async def _load_board(self, client: CloudinaryClient, board: Board):
        image_url = client.image_list_url(board.name)
        image_body = await client.get_json(image_url)
        board.images = extract_resources(image_url, image_body)

        video_url = client.video_list_url(board.name)
        logger.debug(f"Video list URL for '{board.name}': {video_url}")
        video_body = await client.get_json(video_url)
        logger.debug(f"Video list response for '{board.name}': {video_body}")
        board.videos = extract_resources(video_url, video_body)

        board.error = None
        logger.info(f"Board '{board.name}' loaded: {len(board.images)} images, {len(board.videos)} videos.")
