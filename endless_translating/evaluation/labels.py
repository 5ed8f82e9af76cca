"""endless_translating.evaluation.labels

Answer-quality tiers with their fixed display messages and severities.
"""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class EvaluationLabel(Enum):
    EXACT = ("◎ 完全一致です。", Severity.SUCCESS)
    NEAR = ("○ かなり近い表現です。細部を見直してみてください。", Severity.INFO)
    PARTIAL = ("△ 一部は合っていますが、表現がだいぶ異なります。", Severity.WARNING)
    DIFFERENT = ("× 意味や構造が大きく異なります。模範解答を参考にしてください。", Severity.ERROR)

    def __init__(self, message: str, severity: Severity) -> None:
        self.message = message
        self.severity = severity
