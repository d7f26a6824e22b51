import uvicorn
import argparse


def main():
    parser = argparse.ArgumentParser(description="Cloud Boards Backend Launcher")
    parser.add_argument("--port", type=int, default=8422, help="Port to run the backend server on (default: 8422)")
    args = parser.parse_args()

    from boards_backend.main import app
    port = getattr(args, 'port')
    print(f"Cloud Boards 后端服务即将启动于端口 {port} ...")
    print(f"若在本机运行，可访问 http://127.0.0.1:{port}/docs 查看 API 文档")
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
