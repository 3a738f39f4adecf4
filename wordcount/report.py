import logging
from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Sequence

from wordcount.processor import CountSet
from wordcount.summarizer import Failure, Outcome, Success

logger = logging.getLogger(__name__)

TOTAL_LABEL = "total"
STDOUT = "stdout"
STDERR = "stderr"

# Fixed display order of the numeric columns.
COLUMNS = ("lines", "words", "chars", "bytes")


@dataclass(frozen=True)
class ColumnSelection:
    show_lines: bool = False
    show_words: bool = False
    show_chars: bool = False
    show_bytes: bool = False

    @classmethod
    def default(cls) -> "ColumnSelection":
        return cls(show_lines=True, show_words=True, show_bytes=True)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "ColumnSelection":
        wanted = {n for n in names if n in COLUMNS}
        if not wanted:
            return cls.default()
        return cls(**{f"show_{n}": True for n in wanted})

    def enabled(self) -> list[str]:
        return [c for c in COLUMNS if getattr(self, f"show_{c}")]

    def any(self) -> bool:
        return bool(self.enabled())


@dataclass(frozen=True)
class ReportLine:
    text: str
    stream: str  # STDOUT | STDERR

    @property
    def is_error(self) -> bool:
        return self.stream == STDERR


def _successes(outcomes: Iterable[Outcome]) -> list[Success]:
    return [o for o in outcomes if isinstance(o, Success)]


def padding_width(outcomes: Iterable[Outcome]) -> int:
    """
    Digit length of the largest value in any field of any Success,
    displayed or not. 0 when there are no successes.
    """
    return max(
        (len(str(v)) for s in _successes(outcomes) for v in s.counts.values()),
        default=0,
    )


def total_counts(outcomes: Iterable[Outcome]) -> CountSet:
    return reduce(lambda acc, s: acc + s.counts, _successes(outcomes), CountSet())


def with_total(outcomes: Sequence[Outcome]) -> list[Outcome]:
    """
    Return the outcomes with a "total" Success appended when more than one
    Success is present. Failures neither count nor contribute.
    """
    result = list(outcomes)
    if len(_successes(outcomes)) > 1:
        result.append(Success(counts=total_counts(outcomes), label=TOTAL_LABEL))
    return result


def render_outcome(outcome: Outcome, columns: ColumnSelection, width: int) -> ReportLine:
    if isinstance(outcome, Failure):
        return ReportLine(text=outcome.message, stream=STDERR)

    parts = [f"{getattr(outcome.counts, c):>{width}} " for c in columns.enabled()]
    return ReportLine(text="".join(parts) + outcome.label, stream=STDOUT)


def build_report(outcomes: Sequence[Outcome], columns: ColumnSelection) -> list[ReportLine]:
    """
    Render every outcome, plus the total line when there is one, in order.
    The padding width also covers the total's values.
    """
    extended = with_total(outcomes)
    width = padding_width(extended)
    logger.debug("padding width %d for %d outcome(s)", width, len(extended))
    return [render_outcome(o, columns, width) for o in extended]


__all__ = [
    "TOTAL_LABEL",
    "STDOUT",
    "STDERR",
    "COLUMNS",
    "ColumnSelection",
    "ReportLine",
    "padding_width",
    "total_counts",
    "with_total",
    "render_outcome",
    "build_report",
]
