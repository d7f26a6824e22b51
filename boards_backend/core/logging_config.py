# boards_backend/core/logging_config.py

import logging
import logging.config
import os


def setup_logging(log_dir=None):
    """
    配置应用程序的日志记录系统。
    日志同时输出到控制台和按大小轮转的文件 (logs/boards_backend.log)。
    """
    if log_dir is None:
        log_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', '..', 'logs')
    os.makedirs(log_dir, exist_ok=True)
    log_file_path = os.path.join(log_dir, 'boards_backend.log')

    LOGGING_CONFIG = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'default': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'default',
                'level': 'INFO',
                'stream': 'ext://sys.stdout',
            },
            'rotating_file': {
                'class': 'logging.handlers.RotatingFileHandler',
                'formatter': 'default',
                'level': 'DEBUG',
                'filename': log_file_path,
                'maxBytes': 1024 * 1024 * 5,  # 5 MB
                'backupCount': 5,
                'encoding': 'utf-8',
            },
        },
        'loggers': {
            '': {  # Root logger
                'handlers': ['console', 'rotating_file'],
                'level': 'INFO',
            },
            'boards_backend': {
                'level': 'DEBUG',
            },
            'uvicorn.error': {
                'handlers': ['console', 'rotating_file'],
                'level': 'INFO',
                'propagate': False,
            },
            'uvicorn.access': {
                'handlers': ['console', 'rotating_file'],
                'level': 'WARNING',  # 减少访问日志的噪音
                'propagate': False,
            },
        }
    }

    logging.config.dictConfig(LOGGING_CONFIG)
    root_logger = logging.getLogger()
    root_logger.info("Logging system initialized successfully.")
    root_logger.info(f"Log files will be saved to: {log_file_path}")
    return log_file_path
