# boards_backend/core/config.py
import os
from dotenv import load_dotenv

# 加载项目根目录下 .env 文件中的环境变量
env_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), '..', '.env')
load_dotenv(dotenv_path=env_path)


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    应用配置类，从环境变量中读取配置。
    不使用 Pydantic，手动进行类型转换和默认值设置。
    """
    def __init__(self):
        # Cloudinary 租户名。未设置时其值为 None，加载看板时会报错。
        self.CLOUDINARY_CLOUD_NAME: str = os.getenv("CLOUDINARY_CLOUD_NAME")
        self.CLOUDINARY_BASE_URL: str = os.getenv("CLOUDINARY_BASE_URL", "http://res.cloudinary.com")

        # 看板名称，逗号分隔，顺序即展示顺序
        _board_names_str = os.getenv("BOARD_NAMES", "cars,houses,vacation")
        self.BOARD_NAMES: list[str] = [name.strip() for name in _board_names_str.split(',') if name.strip()]

        self.REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", 60))
        self.LOAD_CONCURRENCY: int = max(1, int(os.getenv("LOAD_CONCURRENCY", 1)))
        self.LOAD_ON_STARTUP: bool = _parse_bool(os.getenv("LOAD_ON_STARTUP", "true"))
        self.STOP_ON_ERROR: bool = _parse_bool(os.getenv("STOP_ON_ERROR", "true"))


# 创建一个全局配置实例
settings = Settings()
