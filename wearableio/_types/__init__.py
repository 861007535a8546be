from wearableio._types.activitykind import ActivityKind
from wearableio._types.summary import (
    DecodedRecord, SummaryBuilder, SummaryField)
from wearableio._types.summarydata import SummaryData
