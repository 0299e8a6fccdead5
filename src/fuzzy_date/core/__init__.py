"""
Batch orchestration and exceptions.

``Pipeline`` lives in ``fuzzy_date.core.pipeline`` and is not re-exported
here, because it depends on the modules that import these exceptions.
"""

from fuzzy_date.core.context import ParseContext
from fuzzy_date.core.exceptions import (
    FuzzyDateError,
    ParseExecutionError,
    PipelineError,
    ValidationError,
)

__all__ = [
    "FuzzyDateError",
    "ParseContext",
    "ParseExecutionError",
    "PipelineError",
    "ValidationError",
]
