"""
tsexport.registry - The fixed set of time series data frames.

Names are hardcoded; the frames themselves come from a dataset provider,
any object with a ``get(name) -> DataFrame`` method. Host code hands in a
MappingProvider; the default entry points read pickled frames from the
configured data directory.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, List, Mapping, TypeVar

import pandas as pd

logger = logging.getLogger(__name__)

T = TypeVar("T")

TIME_SERIES_NAMES = (
    'aflow',
    'aloads',
    'dflow',
    'discqw',
    'mflow',
    'mloads',
    'pest21day',
    'pest60day',
    'pestsamp',
    'pestsites',
    'pestweightave',
)


class TableNotFoundError(KeyError):
    """Raised when a registered data frame name cannot be resolved."""
    pass


class MappingProvider:
    """Serve data frames from an in-memory name -> DataFrame mapping."""

    def __init__(self, frames: Mapping[str, pd.DataFrame]):
        self._frames = dict(frames)

    def get(self, name: str) -> pd.DataFrame:
        try:
            return self._frames[name]
        except KeyError:
            raise TableNotFoundError(name) from None


class PickleDirectoryProvider:
    """Serve data frames pickled as ``<data_dir>/<name>.pkl``."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def get(self, name: str) -> pd.DataFrame:
        pkl_path = self.data_dir / f"{name}.pkl"
        if not pkl_path.exists():
            raise TableNotFoundError(f"{name} (looked for {pkl_path})")
        logger.debug(f"Loading {name} from {pkl_path}")
        return pd.read_pickle(pkl_path)


def default_provider(config=None) -> PickleDirectoryProvider:
    """Provider over the configured data directory."""
    if config is None:
        from tsexport.config import ExportConfig
        config = ExportConfig.load()
    return PickleDirectoryProvider(config.require_data_dir())


def get_time_series_data_frame_names() -> List[str]:
    """Get all data frame names, always in the same order."""
    return list(TIME_SERIES_NAMES)


def get_time_series_data_frames_and_names(provider=None) -> Dict[str, pd.DataFrame]:
    """
    Get all data frames keyed by name.

    Args:
        provider: Dataset provider; defaults to the configured data directory

    Raises:
        TableNotFoundError: if the provider cannot resolve one of the names
    """
    if provider is None:
        provider = default_provider()
    return {
        name: provider.get(name)
        for name in get_time_series_data_frame_names()
    }


def for_each_data_frame(data_frames: Mapping[str, pd.DataFrame],
                        fn: Callable[[str, pd.DataFrame], T]) -> List[T]:
    """
    Call fn(name, data_frame) for every entry, in mapping order.

    Returns the values fn returned, in the same order.
    """
    return [
        fn(data_frame_name, data_frame)
        for data_frame_name, data_frame in data_frames.items()
    ]
