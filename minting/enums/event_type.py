from enum import Enum


class EventType(str, Enum):
    OVERRIDE_SET = "override_set"
    ISSUED = "issued"
    BATCH_ISSUED = "batch_issued"
