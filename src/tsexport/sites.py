"""
tsexport.sites - Unique monitoring site ids across the time series.

Only data frames with a SITE_QW_ID column contribute; the rest are skipped
without complaint.
"""

from functools import reduce
from typing import List, Mapping, Set

import pandas as pd

from tsexport.registry import get_time_series_data_frames_and_names

SITE_ID_COLUMN = 'SITE_QW_ID'


def has_site_id_column(frame: pd.DataFrame) -> bool:
    """Check whether a data frame carries the site id column."""
    return SITE_ID_COLUMN in frame.columns


def get_unique_sites_from_data_frame(frame: pd.DataFrame) -> List[str]:
    """Unique site ids of one data frame as strings, in order of first occurrence."""
    # Missing values are not site ids
    return [str(site_id) for site_id in frame[SITE_ID_COLUMN].dropna().unique()]


def concatenate_unique_site_ids(all_ids: Set[str], ids_from_this_frame) -> Set[str]:
    """Union of the ids collected so far and the ids from the next data frame."""
    return set(ids_from_this_frame) | all_ids


def get_site_ids(data_frames: Mapping[str, pd.DataFrame]) -> Set[str]:
    """
    Get all unique site ids from a mapping of data frames.

    Silently ignores any data frames that do not have the site id column.

    Args:
        data_frames: Mapping of data frame names to data frames

    Returns:
        Set of unique site ids
    """
    data_frames_with_site_id_columns = filter(has_site_id_column, data_frames.values())
    sites_from_each_data_frame = map(
        get_unique_sites_from_data_frame,
        data_frames_with_site_id_columns,
    )
    return reduce(concatenate_unique_site_ids, sites_from_each_data_frame, set())


def get_all_site_ids(provider=None) -> Set[str]:
    """Get all unique site ids across every registered time series."""
    return get_site_ids(get_time_series_data_frames_and_names(provider))
