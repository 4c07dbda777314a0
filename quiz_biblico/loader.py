"""
loader.py
======================

問題一覧を API から取得するモジュール。

- GET 1 回だけ（リトライ・バックオフなし）
- 失敗時は QuizLoadError を投げ、呼び出し側（app.py）でログに残す
- レスポンスは JSON 配列で、各要素は
  {"question": str, "options": [str], "answer": str, "explanation": str}
"""

from __future__ import annotations

import logging
from typing import List, Optional

import requests

from .config import AppConfig
from .models import Question

log = logging.getLogger(__name__)


class QuizLoadError(Exception):
    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code


def _raise(resp: requests.Response) -> None:
    if not resp.ok:
        raise QuizLoadError(
            f"GET {resp.url} returned {resp.status_code}: {resp.text[:200]}",
            resp.status_code,
        )


def parse_questions(payload: object) -> List[Question]:
    """JSON をデコードした値を Question のリストに変換する。"""
    if not isinstance(payload, list):
        raise QuizLoadError(f"expected a JSON array, got {type(payload).__name__}")

    questions: List[Question] = []
    for i, item in enumerate(payload):
        try:
            questions.append(Question.from_dict(item))
        except ValueError as e:
            raise QuizLoadError(f"invalid question at position {i}: {e}") from e
    return questions


def fetch_questions(
    config: AppConfig,
    session: Optional[requests.Session] = None,
) -> List[Question]:
    """
    config.api_url から問題一覧を取得する。

    config.request_timeout が None の場合はタイムアウトなしで待つ。
    """
    http = session or requests
    try:
        resp = http.get(config.api_url, timeout=config.request_timeout)
    except requests.RequestException as e:
        raise QuizLoadError(f"GET {config.api_url} failed: {e}") from e

    _raise(resp)

    try:
        payload = resp.json()
    except ValueError as e:
        raise QuizLoadError(f"GET {config.api_url} did not return JSON") from e

    questions = parse_questions(payload)
    log.debug("Fetched %d questions from %s", len(questions), config.api_url)
    return questions
