"""Pattern recognizers for dates, times and locations."""

from __future__ import annotations

from nlcep.recognizers.dates import find_date, find_date_candidates
from nlcep.recognizers.locations import find_location, find_location_candidates
from nlcep.recognizers.selection import drop_overlapping, select_best
from nlcep.recognizers.times import find_time, find_time_candidates

__all__ = [
    "drop_overlapping",
    "find_date",
    "find_date_candidates",
    "find_location",
    "find_location_candidates",
    "find_time",
    "find_time_candidates",
    "select_best",
]
