"""
config.py
=========

アプリ全体で利用する設定値を一元管理する。
API の URL、表示言語、テーマ、ログレベルなどは
すべてこのモジュールを通じて取得する。

読み込み順:
1. AppConfig のデフォルト値
2. ルートの config.toml
3. 環境変数 QUIZ_API_URL（.env も可）
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import toml
from dotenv import load_dotenv

log = logging.getLogger(__name__)


# ------------------------------------------------------------
# 基本パス定義
# ------------------------------------------------------------

ROOT_DIR = Path(__file__).resolve().parent.parent
CONFIG_PATH = ROOT_DIR / "config.toml"

DEFAULT_API_URL = "http://localhost:5000/api/quiz"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


# ------------------------------------------------------------
# AppConfig
# ------------------------------------------------------------

@dataclass
class AppConfig:
    """
    アプリ設定クラス。

    - 問題取得 API の URL とタイムアウト
    - 表示言語とテーマ
    - ログレベル
    """

    # ---------- API ----------
    api_url: str = DEFAULT_API_URL
    # None はタイムアウトなし
    request_timeout: Optional[float] = None

    # ---------- 表示 ----------
    title: Optional[str] = None
    language: str = "pt"
    theme: str = "light"

    # ---------- ログ ----------
    log_level: str = "INFO"

    # ============================================================
    # 初期化処理
    # ============================================================

    def __post_init__(self):
        # 環境変数があれば config.toml より優先
        env_url = self._load_api_url()
        if env_url:
            self.api_url = env_url

    # ============================================================
    # 内部関数
    # ============================================================

    @staticmethod
    def _load_api_url() -> str:
        """QUIZ_API_URL を環境変数または .env から読む。"""
        load_dotenv(ROOT_DIR / ".env")
        return os.environ.get("QUIZ_API_URL", "").strip()

    # ============================================================
    # 生成
    # ============================================================

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "AppConfig":
        """config.toml を読み込んだ dict から作る。不正な値はデフォルトのまま。"""
        app = cfg.get("app") if isinstance(cfg.get("app"), dict) else {}
        api = cfg.get("api") if isinstance(cfg.get("api"), dict) else {}
        logging_cfg = cfg.get("logging") if isinstance(cfg.get("logging"), dict) else {}

        kwargs: Dict[str, Any] = {}

        if isinstance(api.get("url"), str) and api["url"]:
            kwargs["api_url"] = api["url"]
        timeout = api.get("timeout")
        if isinstance(timeout, (int, float)) and not isinstance(timeout, bool) and timeout > 0:
            kwargs["request_timeout"] = float(timeout)

        for key in ("title", "language", "theme"):
            if isinstance(app.get(key), str) and app[key]:
                kwargs[key] = app[key]

        level = logging_cfg.get("level")
        if isinstance(level, str) and level:
            kwargs["log_level"] = level.upper()

        return cls(**kwargs)


def load_app_config(path: Path = CONFIG_PATH) -> AppConfig:
    """
    config.toml を読み込んで AppConfig を返す。
    ファイルが無い・壊れている場合はデフォルト値を使う。
    """
    cfg: Dict[str, Any] = {}
    if path.exists():
        try:
            cfg = toml.load(path)
        except (toml.TomlDecodeError, OSError) as e:
            log.warning("Could not read %s, using defaults: %s", path, e)
            cfg = {}
    return AppConfig.from_dict(cfg)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
