"""应用配置 - 统一的配置参数管理"""
import os
import sys
import logging
import configparser
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


def _get_config_file() -> str:
    """获取配置文件路径（环境变量 > 可执行文件目录 > 当前目录 > 项目根目录）"""
    if env_config := os.getenv("SETTINGS_FILE"):
        logger.info(f"[config] Using config from env: {env_config}")
        return env_config

    # PyInstaller 打包后，配置文件在可执行文件同目录
    if getattr(sys, 'frozen', False):
        exe_dir = os.path.dirname(os.path.abspath(sys.executable))
        exe_config = os.path.join(exe_dir, "settings.ini")
        if os.path.exists(exe_config):
            logger.info(f"[config] Using config from exe dir: {exe_config}")
            return exe_config
        logger.warning(f"[config] Config file not found in exe dir: {exe_config}")

    cwd_config = Path.cwd() / "settings.ini"
    if cwd_config.exists():
        logger.info(f"[config] Using config from cwd: {cwd_config}")
        return str(cwd_config)

    root_config = Path(__file__).parent.parent.parent / "settings.ini"
    if root_config.exists():
        logger.info(f"[config] Using config from root: {root_config}")
        return str(root_config)

    # 文件不存在时使用默认值
    logger.debug(f"[config] No config file found, using defaults. Would use: {cwd_config}")
    return str(cwd_config)


def _load_config() -> configparser.ConfigParser:
    """加载外部配置文件"""
    config = configparser.ConfigParser()
    config_file = _get_config_file()

    if os.path.exists(config_file):
        # 配置文件本身也可能不是 UTF-8
        for encoding in ('utf-8', 'utf-8-sig', 'cp932', 'latin-1'):
            try:
                config.read(config_file, encoding=encoding)
                if config.sections():
                    logger.info(f"[config] Loaded {config_file} with encoding: {encoding}")
                    break
            except (UnicodeDecodeError, configparser.Error) as e:
                logger.debug(f"[config] Failed to read with encoding {encoding}: {e}")
                continue
        else:
            logger.error(f"[config] Failed to read config file with any encoding")
    return config


def _get_bool(env_name: str, default: bool, config_section: str = None, config_key: str = None) -> bool:
    """解析布尔值：环境变量 > 配置文件 > 默认值"""
    if raw := os.getenv(env_name):
        return str(raw).strip().lower() in {"1", "true", "yes", "y", "on"}

    if config_section and config_key:
        _config = _load_config()
        if _config.has_option(config_section, config_key):
            try:
                return _config.getboolean(config_section, config_key)
            except ValueError:
                logger.warning(f"[config] Invalid boolean for {config_section}.{config_key}")

    return default


def _get_int(env_name: str, default: int, config_section: str = None, config_key: str = None) -> int:
    """解析整数：环境变量 > 配置文件 > 默认值"""
    if raw := os.getenv(env_name):
        try:
            return int(raw) if raw.strip() else default
        except ValueError:
            logger.warning(f"[config] Invalid integer in {env_name}: {raw!r}")

    if config_section and config_key:
        _config = _load_config()
        if _config.has_option(config_section, config_key):
            try:
                return _config.getint(config_section, config_key)
            except ValueError:
                logger.warning(f"[config] Invalid integer for {config_section}.{config_key}")

    return default


def _get_str(env_name: str, default: str, config_section: str = None, config_key: str = None) -> str:
    """解析字符串：环境变量 > 配置文件 > 默认值"""
    if raw := os.getenv(env_name):
        return raw

    if config_section and config_key:
        _config = _load_config()
        if _config.has_option(config_section, config_key):
            return _config.get(config_section, config_key)

    return default


@dataclass
class Settings:
    """应用配置类 - 优先级：环境变量 > settings.ini > 默认值"""

    # ===== 服务器配置 =====
    HOST: str = _get_str("APP_HOST", "127.0.0.1", "server", "host")
    PORT: int = _get_int("APP_PORT", 8000, "server", "port")
    DEBUG: bool = _get_bool("APP_DEBUG", False, "server", "debug")

    # ===== API 配置 =====
    API_PREFIX: str = _get_str("API_PREFIX", "/api/v1", "api", "api_prefix")
    MAX_CONTENT_LENGTH: int = _get_int("MAX_CONTENT_LENGTH", 16 * 1024 * 1024, "api", "max_content_length")

    # ===== 日志配置 =====
    LOG_LEVEL: str = _get_str("APP_LOG_LEVEL", "INFO", "log", "log_level")
    LOG_DIR: str = _get_str("APP_LOG_DIR", "logs", "log", "log_dir")
    LOG_FILE_NAME: str = _get_str("APP_LOG_FILE", "app.log", "log", "log_file")
    LOG_BACKUP_COUNT: int = _get_int("APP_LOG_BACKUP", 7, "log", "log_backup_count")
    USE_WATCHED_LOG: bool = _get_bool("APP_USE_WATCHED_LOG", False, "log", "use_watched_log")

    # ===== 编码配置 =====
    CHARSET_HEADER_PROBE_BYTES: int = _get_int("CHARSET_HEADER_PROBE_BYTES", 64, "charset", "header_probe_bytes")
    CHARSET_FALLBACK_ON_NO_MATCH: bool = _get_bool("CHARSET_FALLBACK_ON_NO_MATCH", True, "charset", "fallback_on_no_match")
    CHARSET_FALLBACK_ON_MISMATCH: bool = _get_bool("CHARSET_FALLBACK_ON_MISMATCH", False, "charset", "fallback_on_mismatch")

    # ===== 方法 =====
    def to_flask_config(self) -> dict:
        """转换为 Flask 配置格式"""
        return {
            "DEBUG": self.DEBUG,
            "MAX_CONTENT_LENGTH": self.MAX_CONTENT_LENGTH,
        }

    def validate(self) -> bool:
        """验证配置并创建日志目录"""
        if self.CHARSET_HEADER_PROBE_BYTES <= 0:
            return False
        if self.LOG_DIR and not os.path.exists(self.LOG_DIR):
            try:
                os.makedirs(self.LOG_DIR, exist_ok=True)
            except OSError:
                return False
        return True
