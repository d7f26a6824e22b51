# boards_frontend/config.py

import argparse


class AppConfig:
    """
    Parses command-line arguments and constructs all necessary API endpoint URLs.
    """
    def __init__(self, argv=None):
        parser = argparse.ArgumentParser(description="Cloud Boards Frontend Launcher")
        parser.add_argument(
            "--port",
            type=int,
            default=10102,
            help="Port to run the frontend server on (default: 10102)"
        )
        parser.add_argument(
            "--bnport",
            type=int,
            default=8422,
            help="Port of the backend server (default: 8422)"
        )
        parser.add_argument(
            "--bnserver",
            type=str,
            default="http://127.0.0.1",
            help="Backend server address (default: http://127.0.0.1)"
        )

        # 使用 parse_known_args 避免 Gradio 在 reload 模式下传入额外参数导致出错
        args, _ = parser.parse_known_args(argv)

        self.run_port = args.port
        backend_base_url = f"{args.bnserver}:{args.bnport}"

        # --- API Endpoints ---
        self.API_BASE_URL = f"{backend_base_url}/api"
        self.ROOT_URL = backend_base_url

        self.BOARDS_URL = f"{self.API_BASE_URL}/boards"
        self.LOAD_BOARDS_URL = f"{self.BOARDS_URL}/load"

        # Host used to turn resource descriptors into media URLs.
        self.MEDIA_BASE_URL = "https://res.cloudinary.com"


# Create a single, globally accessible configuration instance.
config = AppConfig()
