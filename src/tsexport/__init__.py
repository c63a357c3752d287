"""
tsexport - Time series serialization
====================================

Writes the eleven time series data frames to quoted CSV files and collects
the monitoring site ids they reference.

Modules:
    registry - Known data frame names and dataset providers
    export   - CSV writer and batch serializer
    sites    - Unique SITE_QW_ID values across data frames
    config   - Default paths, ~/.tsexport/config.json, TSEXPORT_* variables

Usage:
    from tsexport import serialize_time_series, get_all_site_ids
    from tsexport.registry import MappingProvider
"""

__version__ = "1.0.0"

# Convenience imports for the public entry points
from tsexport.registry import (
    get_time_series_data_frame_names,
    get_time_series_data_frames_and_names,
    for_each_data_frame,
)
from tsexport.export.core import serialize_time_series, serialize_specific_time_series
from tsexport.sites import get_site_ids, get_all_site_ids
