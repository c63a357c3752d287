#!/usr/bin/env python3
"""
tsexport Configuration

Defaults for where time series are serialized and where the source datasets live.
Values are configurable via ~/.tsexport/config.json (preferred) or environment variables.

Priority: config.json > environment variable > hardcoded default
"""

import os
import json
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================

class ConfigurationError(Exception):
    """Raised when required configuration is missing."""
    pass


# =============================================================================
# DEFAULTS
# =============================================================================

# Directory the serialized time series are written to (trailing slash required)
BASE_PATH = 'inst/extdata/'

# Suffix appended to each data frame name
EXTENSION = '.csv'

CONFIG_FILE = Path.home() / ".tsexport" / "config.json"


# =============================================================================
# CONFIGURATION LOADING
# =============================================================================

def _load_config(config_file: Path = None) -> dict:
    """Load configuration from JSON file."""
    config_file = config_file or CONFIG_FILE
    if config_file.exists():
        try:
            with open(config_file, "r") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable config file {config_file}: {e}")
    return {}


class ExportConfig:
    """Configuration for time series serialization.

    Loaded from the 'export' section of ~/.tsexport/config.json, with
    TSEXPORT_* environment variables as a fallback. Everything except
    data_dir has a default, so serialization works out of the box once
    the datasets are available.
    """

    def __init__(self, config_dict: dict = None):
        cfg = config_dict or {}
        self.base_path: str = (
            cfg.get('base_path') or os.getenv('TSEXPORT_BASE_PATH') or BASE_PATH
        )
        self.extension: str = (
            cfg.get('extension') or os.getenv('TSEXPORT_EXTENSION') or EXTENSION
        )
        _data_dir = cfg.get('data_dir') or os.getenv('TSEXPORT_DATA_DIR')
        self.data_dir: Optional[Path] = Path(_data_dir) if _data_dir else None

    @classmethod
    def load(cls, config_file: Path = None) -> 'ExportConfig':
        """Load export config from ~/.tsexport/config.json."""
        config = _load_config(config_file)
        return cls(config.get('export', {}))

    def require_data_dir(self) -> Path:
        """Get data_dir, raising helpful error if not configured."""
        if self.data_dir is None:
            raise ConfigurationError(
                "No time series data directory is configured.\n\n"
                "Set 'data_dir' in the 'export' section of ~/.tsexport/config.json\n"
                "or the TSEXPORT_DATA_DIR environment variable."
            )
        return self.data_dir

    def to_dict(self) -> dict:
        """Serialize to dict for saving to config.json."""
        d = {
            'base_path': self.base_path,
            'extension': self.extension,
        }
        if self.data_dir:
            d['data_dir'] = str(self.data_dir)
        return d
