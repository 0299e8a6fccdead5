from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from fuzzy_date.core.context import ParseContext
from fuzzy_date.core.exceptions import ParseExecutionError
from fuzzy_date.fuzzy_date import FuzzyDate


class Pipeline:
    """
    Parses a batch of raw date expressions and returns them in
    chronological order.
    Parsing itself is pure; this class only owns stats and logging.
    """

    def __init__(self, context: ParseContext):
        self.ctx = context
        self.log = context.logger
        self.skip_blank = bool(context.config.pipeline.get("skip_blank", True))
        self.stop_on_error = bool(context.config.pipeline.get("stop_on_error", False))

    def run(self, lines: Iterable[str]) -> List[FuzzyDate]:
        self.log.info("Pipeline starting")

        stats = {"total": 0, "parsed": 0, "failed": 0, "skipped": 0}
        self.ctx.stats = stats
        self.ctx.errors = []
        parsed: List[FuzzyDate] = []

        for lineno, raw in enumerate(lines, start=1):
            stats["total"] += 1
            text = raw.rstrip("\r\n")

            if self.skip_blank and not text.strip():
                stats["skipped"] += 1
                continue

            result = FuzzyDate.parse(text)
            if result.ok:
                parsed.append(result.value)
                stats["parsed"] += 1
                continue

            stats["failed"] += 1
            self.ctx.errors.append(
                {"line": lineno, "input": text, "error": result.error.value}
            )
            self.log.warning("Line %d: %r -> %s", lineno, text, result.error.value)

            if self.stop_on_error:
                raise ParseExecutionError(
                    f"Line {lineno}: {text!r}: {result.error.value}"
                )

        self.log.info(
            "Pipeline completed: %d parsed, %d failed, %d skipped",
            stats["parsed"],
            stats["failed"],
            stats["skipped"],
        )
        return sorted(parsed)

    def run_file(self, path: Path) -> List[FuzzyDate]:
        """
        Parse a UTF-8 file, one expression per line.
        Undecodable bytes become U+FFFD, so such a line fails like any other
        unparseable input.
        """
        self.ctx.input_path = str(path)
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                return self.run(f)
        except OSError as exc:
            self.log.exception("Could not read %s", path)
            raise ParseExecutionError(str(exc)) from exc
