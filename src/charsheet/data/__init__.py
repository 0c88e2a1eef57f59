"""Data layer utilities for loading definitions and storing rosters."""

from .errors import (
    DataError,
    DataLoadError,
    DataReferenceError,
    DataTransportError,
    DataValidationError,
)
from .paths import get_definitions_path, get_package_data_dir

__all__ = [
    "DataError",
    "DataLoadError",
    "DataReferenceError",
    "DataTransportError",
    "DataValidationError",
    "get_definitions_path",
    "get_package_data_dir",
]
