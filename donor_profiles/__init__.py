"""
Donor profile flattener.

Turns heterogeneous donor survey documents into flat, normalized records.
"""

__version__ = "0.1.0"

from .models import DonorProfile, OutputRecord
from .transformer import extract_int, extract_string, transform, transform_batch

__all__ = [
    "DonorProfile",
    "OutputRecord",
    "extract_int",
    "extract_string",
    "transform",
    "transform_batch",
]
