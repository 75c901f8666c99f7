"""
aggregate.py — Detection Record Aggregation
-------------------------------------------

Folds a sequence of detection records into three frequency maps
(by species label, by submitter, by day-part) and the summary figures shown
on the analytics page.

This is a plain data transform: no database, no Streamlit, no model calls.
Records arrive as an explicit argument and nothing is kept between calls.

Ties for the most common label / most active submitter go to the key seen
first in the input; ties between day-parts go to the earliest in canonical
order (morning, afternoon, evening, night).

Project: Glaucus Fish Identification
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

from config.settings import ANONYMOUS_SUBMITTER
from core.dayparts import DayPart, bucketize
from core.labels import extract_label


@dataclass(frozen=True)
class DetectionRecord:
    """One analysed upload, as read back from storage."""
    result_text: Optional[str]
    submitter_id: Optional[str] = ANONYMOUS_SUBMITTER
    captured_at: Optional[int] = None  # epoch seconds


def _empty_dayparts() -> Dict[DayPart, int]:
    return {part: 0 for part in DayPart}


@dataclass(frozen=True)
class AggregationResult:
    label_counts: Dict[str, int] = field(default_factory=dict)
    submitter_counts: Dict[str, int] = field(default_factory=dict)
    daypart_counts: Dict[DayPart, int] = field(default_factory=_empty_dayparts)
    total: int = 0
    distinct_labels: int = 0
    top_label: Optional[str] = None
    top_submitter: Optional[str] = None
    top_daypart: Optional[DayPart] = None

    @property
    def has_data(self) -> bool:
        return self.total > 0


def _argmax(counts):
    # max() keeps the first maximal key in iteration order
    return max(counts, key=counts.get)


def aggregate(records: Iterable[DetectionRecord]) -> AggregationResult:
    """
    Aggregate detection records for the analytics view.

    Args:
        records: Detection records in a stable order (ties depend on it)

    Returns:
        AggregationResult: Frequency maps and summary figures; an empty result
        when there are no records
    """
    records = list(records)
    if not records:
        return AggregationResult()

    label_counts: Dict[str, int] = {}
    submitter_counts: Dict[str, int] = {}
    daypart_counts = _empty_dayparts()

    for record in records:
        label = extract_label(record.result_text)
        label_counts[label] = label_counts.get(label, 0) + 1

        submitter = record.submitter_id or ANONYMOUS_SUBMITTER
        submitter_counts[submitter] = submitter_counts.get(submitter, 0) + 1

        if record.captured_at is not None:
            daypart_counts[bucketize(record.captured_at)] += 1

    return AggregationResult(
        label_counts=label_counts,
        submitter_counts=submitter_counts,
        daypart_counts=daypart_counts,
        total=len(records),
        distinct_labels=len(label_counts),
        top_label=_argmax(label_counts),
        top_submitter=_argmax(submitter_counts),
        top_daypart=_argmax(daypart_counts),
    )
