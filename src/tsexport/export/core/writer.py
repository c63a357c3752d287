#!/usr/bin/env python3
"""
Table writer - Write one data frame to one quoted CSV file
"""

import csv
import logging
import os
from pathlib import Path
from typing import Union

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

NA_TOKEN = 'NULL'


def build_file_name(data_frame_name: str, base_path: Union[str, Path], extension: str) -> str:
    """Concatenate base path, data frame name and extension."""
    if isinstance(base_path, Path):
        base_path = f"{base_path}{os.sep}"
    return f"{base_path}{data_frame_name}{extension}"


def format_object_floats(data_frame: pd.DataFrame, float_format) -> pd.DataFrame:
    """
    Apply float_format to floats stored in object columns.

    pandas only hands float-typed columns to to_csv's float_format, so mixed
    columns are formatted here on a copy. Missing values are left for na_rep.
    """
    object_columns = data_frame.columns[data_frame.dtypes == object]
    if len(object_columns) == 0:
        return data_frame

    def format_value(value):
        if isinstance(value, (float, np.floating)) and not pd.isna(value):
            return float_format(value)
        return value

    data_frame = data_frame.copy()
    for column in object_columns:
        data_frame[column] = data_frame[column].map(format_value)
    return data_frame


def write_out(data_frame_name: str, data_frame: pd.DataFrame,
              base_path: Union[str, Path], extension: str) -> str:
    """
    Write a data frame to csv.

    Every field is quoted and missing values are written as NULL. Floats use
    whatever formatter is installed in pandas' display.float_format option,
    see fixed_point_notation().

    Args:
        data_frame_name: Name of the data frame, used as the file stem
        data_frame: The data frame itself
        base_path: Directory with trailing slash
        extension: Suffix for the serialized data frame

    Returns:
        The name of the file written
    """
    file_name = build_file_name(data_frame_name, base_path, extension)
    float_format = pd.get_option('display.float_format')
    if float_format is not None:
        data_frame = format_object_floats(data_frame, float_format)
    data_frame.to_csv(
        file_name,
        quoting=csv.QUOTE_ALL,
        na_rep=NA_TOKEN,
        float_format=float_format,
    )
    logger.debug(f"Wrote {len(data_frame)} rows to {file_name}")
    return file_name
