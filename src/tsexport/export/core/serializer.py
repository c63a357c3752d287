#!/usr/bin/env python3
"""
Batch serializer - Write every time series data frame to its own file

serialize_time_series() is the default behavior used on job servers.
Tests and customizations should call serialize_specific_time_series().
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import List, Mapping, Union

import numpy as np
import pandas as pd

from tsexport.export.core.writer import write_out
from tsexport.config import ExportConfig
from tsexport.registry import (
    default_provider,
    for_each_data_frame,
    get_time_series_data_frames_and_names,
)

logger = logging.getLogger(__name__)


def fixed_point_format(value) -> str:
    """Format a float in positional notation, never exponential."""
    return np.format_float_positional(value, trim='-')


@contextmanager
def fixed_point_notation():
    """
    Temporarily install fixed_point_format as pandas' float formatter.

    The previous display.float_format is restored on exit, including when
    the body raises.
    """
    previous = pd.get_option('display.float_format')
    logger.debug(f"Overriding display.float_format (was {previous!r})")
    with pd.option_context('display.float_format', fixed_point_format):
        yield


def serialize_specific_time_series(data_frames: Mapping[str, pd.DataFrame],
                                   base_path: Union[str, Path],
                                   extension: str) -> List[str]:
    """
    Serialize the given data frames to csv.

    File names in the destination directory are the data frame's name
    followed by the extension. Floats are written in fixed-point notation
    for the duration of the call.

    Args:
        data_frames: Mapping of data frame names to data frames
        base_path: Destination directory, including trailing slash
        extension: File extension, e.g. '.csv'

    Returns:
        File names written, in mapping order
    """
    with fixed_point_notation():
        files_written = for_each_data_frame(
            data_frames,
            lambda data_frame_name, data_frame: write_out(
                data_frame_name, data_frame, base_path, extension
            ),
        )
    logger.info(f"Serialized {len(files_written)} time series to {base_path}")
    return files_written


def serialize_time_series(provider=None, config=None) -> List[str]:
    """Serialize all registered time series with the configured defaults."""
    if config is None:
        config = ExportConfig.load()
    if provider is None:
        provider = default_provider(config)

    return serialize_specific_time_series(
        get_time_series_data_frames_and_names(provider),
        config.base_path,
        config.extension,
    )
