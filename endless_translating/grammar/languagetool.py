"""endless_translating.grammar.languagetool

LanguageTool-backed grammar checker.

Thin async wrapper around the public `/v2/check` endpoint. Every failure is
folded into a single displayable line so a practice cycle always completes.
"""

from __future__ import annotations

from typing import Any, List, Optional

import httpx

from endless_translating.grammar.interfaces import LanguageToolConfig
from endless_translating.utils.logger import get_logger

logger = get_logger(__name__)

NO_ISSUES_MESSAGE = "文法上の問題は特に見つかりませんでした。"
UNEXPECTED_SHAPE_MESSAGE = "LanguageTool 応答エラー: 想定外の応答形式です。"
SUGGESTION_SEPARATOR = " → Suggestion: "


def _first_suggestion(replacements: Any) -> Optional[str]:
    if not isinstance(replacements, list) or not replacements:
        return None
    first = replacements[0]
    if isinstance(first, dict):
        value = first.get("value")
        return None if value is None else str(value)
    return str(first)


def format_matches(matches: Any) -> List[str]:
    """Render LanguageTool matches as numbered lines, in server order.

    A `matches` value that is not a list is reported as one diagnostic line;
    entries that are not objects are shown as plain text.
    """
    if matches is None:
        return [NO_ISSUES_MESSAGE]
    if not isinstance(matches, list):
        return [UNEXPECTED_SHAPE_MESSAGE]
    if not matches:
        return [NO_ISSUES_MESSAGE]

    lines: List[str] = []
    for idx, m in enumerate(matches, start=1):
        if not isinstance(m, dict):
            lines.append(f"{idx}. {m}")
            continue
        line = f"{idx}. {m.get('message', '')}"
        suggestion = _first_suggestion(m.get("replacements"))
        if suggestion is not None:
            line += SUGGESTION_SEPARATOR + suggestion
        lines.append(line)
    return lines


class LanguageToolChecker:
    def __init__(self, *, config: Optional[LanguageToolConfig] = None) -> None:
        self.config = config or LanguageToolConfig.from_env()

    async def check(self, sentence: str) -> List[str]:
        data = {"text": sentence, "language": self.config.language}
        try:
            async with httpx.AsyncClient(timeout=self.config.timeout_s) as client:
                response = await client.post(
                    self.config.endpoint,
                    data=data,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("LanguageTool request failed: %s", e)
            return [f"LanguageTool 通信エラー: {e.__class__.__name__}: {e}"]

        if not response.is_success:
            logger.warning("LanguageTool returned HTTP %s", response.status_code)
            return [f"LanguageTool HTTPエラー: {response.status_code} {response.reason_phrase}"]

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning("LanguageTool returned an undecodable body: %s", e)
            return [f"LanguageTool 応答エラー: {e}"]

        if not isinstance(payload, dict):
            logger.warning("LanguageTool returned a non-object body.")
            return [UNEXPECTED_SHAPE_MESSAGE]
        return format_matches(payload.get("matches"))
