import os
import logging
from logging.handlers import TimedRotatingFileHandler, WatchedFileHandler
from flask import Flask, jsonify
from flask_cors import CORS

from .config.system_settings import Settings
from .services.charset import Charset, CharsetService, DecodeMismatch, NoMatch, parse_charset


def create_app(settings: Settings | None = None) -> Flask:
    from .middleware import register_error_handlers, setup_middleware
    from .api.routes import register_routes

    settings = settings or Settings()
    if not settings.validate():
        raise ValueError(f"配置无效: CHARSET_HEADER_PROBE_BYTES={settings.CHARSET_HEADER_PROBE_BYTES}, LOG_DIR={settings.LOG_DIR!r}")

    app = Flask(__name__)
    app.config.update(settings.to_flask_config())
    app.extensions['charset_service'] = CharsetService.from_settings(settings)

    CORS(app, origins="*", methods=["GET", "POST", "OPTIONS"], allow_headers=["Content-Type", "Authorization", "X-Requested-With"])

    _configure_logging(settings)

    setup_middleware(app)
    register_error_handlers(app)
    register_routes(app, settings.API_PREFIX)

    @app.route('/health')
    def health():
        return jsonify({'ok': True})

    logging.getLogger(__name__).info("应用初始化完成")
    return app


def _configure_logging(settings: Settings):
    root_logger = logging.getLogger()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console = logging.StreamHandler()
    console.setLevel(level)
    formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(name)s: %(message)s', '%Y-%m-%d %H:%M:%S')
    console.setFormatter(formatter)
    root_logger.addHandler(console)

    # LOG_DIR 为空时只输出到控制台
    if not settings.LOG_DIR:
        return
    try:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        log_file = os.path.join(settings.LOG_DIR, settings.LOG_FILE_NAME)
        if settings.USE_WATCHED_LOG:
            file_handler = WatchedFileHandler(log_file, encoding='utf-8')
        else:
            file_handler = TimedRotatingFileHandler(log_file, when='midnight', backupCount=settings.LOG_BACKUP_COUNT, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
    except OSError as e:
        logging.getLogger(__name__).warning(f'文件日志配置失败: {e}')

__all__ = ['create_app', 'Charset', 'CharsetService', 'DecodeMismatch', 'NoMatch', 'parse_charset', 'Settings']
