from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ParseContext:
    """
    Shared batch context.
    Carries configuration in, and stats/errors out of, a pipeline run.
    """

    config: Any
    logger: Any

    input_path: Optional[str] = None

    stats: Dict[str, int] = field(default_factory=dict)
    errors: List[Dict[str, Any]] = field(default_factory=list)

    debug: bool = False
