"""Splits free-form summary text into summary, action item and other sections.

The split is a line-oriented heuristic over whatever the summarization model
produced. Header lines are recognised by keyword only, so a body line that
happens to mention "summary" or "next step" is treated as a header and
dropped. Phrasing the model never uses (for example "To-dos") is not
recognised and its lines stay in the current section.
"""

from enum import Enum

from .models import ClassifiedSections

SUMMARY_MARKERS = ("key points", "summary")
ACTION_MARKERS = ("action item", "next step")


class _Section(Enum):
    SUMMARY = "summary"
    ACTION_ITEMS = "action_items"
    OTHER = "other"


def classify_summary(summary_text: str) -> ClassifiedSections:
    """
    Partitions summary text into three disjoint sections.

    Args:
        summary_text: Free-form text returned by the summarization service.

    Returns:
        ClassifiedSections with each buffer stripped of surrounding whitespace.
    """
    buffers = {section: [] for section in _Section}
    current = _Section.OTHER

    for line in summary_text.splitlines():
        lowered = line.lower()
        if any(marker in lowered for marker in SUMMARY_MARKERS):
            current = _Section.SUMMARY
            continue
        if any(marker in lowered for marker in ACTION_MARKERS):
            current = _Section.ACTION_ITEMS
            continue
        if not line.strip():
            continue
        buffers[current].append(f"{line}\n")

    return ClassifiedSections(
        summary="".join(buffers[_Section.SUMMARY]).strip(),
        action_items="".join(buffers[_Section.ACTION_ITEMS]).strip(),
        other="".join(buffers[_Section.OTHER]).strip(),
    )
