"""
Shared fixtures for donor profile tests.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

from donor_profiles.config import reset_settings
from donor_profiles.models import DonorProfile


def answer(value: Any, label: str = "") -> Dict[str, Any]:
    """Build a raw answer entry."""
    return {"answer": {"value": value}, "question": {"label": label}}


def donor_document(
    answers: Optional[Dict[str, Any]] = None,
    user_id: str = "u1",
    donor_code: str = "D-001",
    date_of_birth: str = "1990-01-01T00:00:00Z",
    profile_bio: str = "",
    photos: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """Build a raw donor profile document as it appears on disk."""
    if photos is None:
        photos = ["img.jpg"]
    return {
        "answers": answers or {},
        "user": {
            "id": user_id,
            "donorCode": donor_code,
            "dateOfBirth": date_of_birth,
            "freeze_member": {"profile_bio": profile_bio},
        },
        "photos": [{"cropped_source": url} for url in photos],
        "program": "freeze",
    }


@pytest.fixture
def make_donor():
    """Factory returning validated donor profiles."""

    def _make(**kwargs: Any) -> DonorProfile:
        return DonorProfile.model_validate(donor_document(**kwargs))

    return _make


@pytest.fixture
def temp_dir(tmp_path) -> Path:
    """Temporary working directory for file-based tests."""
    return tmp_path


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are re-read from the environment for every test."""
    reset_settings()
    yield
    reset_settings()
