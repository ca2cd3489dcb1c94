from coursegate.scheduling.accessibility import (
    BatchSelection,
    accessible_batches,
    is_accessible,
    is_batch_accessible,
    parse_time,
    schedule_label,
    select_batch,
)

__all__ = [
    "BatchSelection",
    "accessible_batches",
    "is_accessible",
    "is_batch_accessible",
    "parse_time",
    "schedule_label",
    "select_batch",
]
