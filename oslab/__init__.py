"""Operating-systems lab exercises: paging, CPU and disk scheduling, banker's algorithm, synchronisation and process demos."""

__version__ = "0.1.0"