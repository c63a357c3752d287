"""
tsexport Export

Serialize time series data frames to quoted CSV files.
"""
