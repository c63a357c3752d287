"""Shared fixtures: a full set of small time series frames."""

import numpy as np
import pandas as pd
import pytest

from tsexport.registry import MappingProvider, TIME_SERIES_NAMES


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def time_series_frames():
    """One small frame per registered name; every other one has site ids."""
    frames = {}
    for i, name in enumerate(TIME_SERIES_NAMES):
        data = {
            'DATE': [f'2015-01-0{d}' for d in range(1, 4)],
            'VALUE': [float(i), float(i) + 0.5, np.nan],
        }
        if i % 2 == 0:
            data['SITE_QW_ID'] = [f'0{i}', f'0{i}', '99']
        frames[name] = pd.DataFrame(data)
    return frames


@pytest.fixture
def provider(time_series_frames):
    """MappingProvider over time_series_frames."""
    return MappingProvider(time_series_frames)


@pytest.fixture
def base_path(tmp_path):
    """Output directory as a string with trailing separator."""
    return f"{tmp_path}/"
