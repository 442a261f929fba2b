"""Result models — calculator output contract."""

from wallbox_roi.models.results import CalculatorResult

__all__ = [
    "CalculatorResult",
]
