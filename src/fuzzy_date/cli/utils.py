
from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from rich.console import Console

from fuzzy_date.config import get_config
from fuzzy_date.core.context import ParseContext
from fuzzy_date.core.pipeline import Pipeline
from fuzzy_date.fuzzy_date import FuzzyDate
from fuzzy_date.instant import Instant, to_iso
from fuzzy_date.logging import get_logger

console = Console()
log = get_logger("fuzzy_date.cli")


def format_bound(bound: Optional[Instant]) -> Optional[str]:
    return None if bound is None else to_iso(bound)


def describe(date: FuzzyDate) -> Dict[str, Any]:
    """
    Canonical JSON plus every projection, keyed the way stored records
    carry them.
    """
    return {
        "original": date.original,
        "normalized": date.normalized,
        "collationKey": date.collation_key,
        "lowerBound": format_bound(date.lower_bound),
        "upperBound": format_bound(date.upper_bound),
        "formal": date.formal,
        "model": date.to_json(),
    }


def load_dates(path: Path, *, verbose: bool = False) -> Tuple[List[FuzzyDate], ParseContext]:
    """
    Run the batch pipeline over a file with one expression per line.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    cfg = get_config()
    ctx = ParseContext(config=cfg, logger=log, input_path=str(path), debug=cfg.debug)

    t0 = time.perf_counter()
    dates = Pipeline(ctx).run_file(path)
    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Parsed {ctx.stats.get('parsed', 0)} dates in {elapsed:.2f}s")

    return dates, ctx


def write_json(
    data: Any,
    *,
    out: Path | None,
    pretty: bool,
):
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
