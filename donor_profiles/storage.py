"""
File collaborators for a batch run.

The source reads a JSON array of donor profile documents; the sink writes the
flattened records back out as a pretty-printed JSON array. Any failure here is
fatal to the batch and surfaces as a ``DonorProfilesException``.
"""

import json
from pathlib import Path
from typing import List, Sequence, Union

from pydantic import TypeAdapter, ValidationError

from donor_profiles.models import DonorProfile, OutputRecord
from donor_profiles.utils.errors import (
    InputUnavailableError,
    MalformedInputError,
    OutputUnwritableError,
)
from donor_profiles.utils.logging import get_logger

logger = get_logger(__name__)

_donor_list = TypeAdapter(List[DonorProfile])


def load_donor_profiles(path: Union[str, Path]) -> List[DonorProfile]:
    """
    Read every donor profile document from a JSON file.

    Args:
        path: Path to a JSON array of donor profiles

    Returns:
        Donor profiles in file order

    Raises:
        InputUnavailableError: The file is missing or unreadable
        MalformedInputError: The content is not an array of donor documents
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputUnavailableError(str(path), str(e)) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedInputError(str(path), f"invalid JSON: {e}") from e

    if data is None:
        data = []
    if not isinstance(data, list):
        raise MalformedInputError(str(path), f"expected a JSON array, got {type(data).__name__}")

    try:
        donors = _donor_list.validate_python(data)
    except ValidationError as e:
        raise MalformedInputError(str(path), str(e)) from e

    logger.info(f"Loaded {len(donors)} donor profiles from {path}")
    return donors


def write_output_records(
    path: Union[str, Path],
    records: Sequence[OutputRecord],
    indent: int = 2,
) -> None:
    """
    Write output records as a JSON array.

    Non-ASCII and HTML-sensitive characters are written as-is.

    Raises:
        OutputUnwritableError: The file could not be written
    """
    path = Path(path)
    payload = [record.model_dump(by_alias=True) for record in records]

    try:
        with path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=indent, ensure_ascii=False)
            f.write("\n")
    except OSError as e:
        raise OutputUnwritableError(str(path), str(e)) from e

    logger.info(f"Wrote {len(payload)} records to {path}")
