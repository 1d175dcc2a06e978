"""
Tests for the donor profile exception hierarchy.
"""

from donor_profiles.utils.errors import (
    DonorProfilesException,
    InputError,
    InputUnavailableError,
    MalformedInputError,
    MissingPhotoError,
    OutputError,
    OutputUnwritableError,
    TransformError,
)


class TestErrors:
    """Test exception types and messages."""

    def test_hierarchy(self):
        assert issubclass(InputUnavailableError, InputError)
        assert issubclass(MalformedInputError, InputError)
        assert issubclass(MissingPhotoError, TransformError)
        assert issubclass(OutputUnwritableError, OutputError)
        for error_type in (InputError, TransformError, OutputError):
            assert issubclass(error_type, DonorProfilesException)

    def test_details_in_str(self):
        error = InputUnavailableError("donorprofiles.json", "No such file")
        assert "donorprofiles.json" in str(error)
        assert "| Details:" in str(error)
        assert error.details == {"path": "donorprofiles.json"}

    def test_str_without_details(self):
        assert str(DonorProfilesException("plain")) == "plain"

    def test_missing_photo_names_donor(self):
        error = MissingPhotoError("u7")
        assert "u7" in str(error)
        assert error.details == {"user_id": "u7"}
