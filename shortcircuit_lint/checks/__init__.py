"""Registry of analysis checks."""

from __future__ import annotations

from typing import Callable, List

from ..context import AnalysisContext
from ..issues import Finding

from . import short_circuit

Check = Callable[[AnalysisContext], List[Finding]]

CHECKS: list[Check] = [
    short_circuit.run,
]

__all__ = ["CHECKS", "Check"]
