import pytest

from objstore.storage.exceptions import ValidationError
from objstore.utils.validators import validate_location, validate_path_location


class TestValidateLocation:
    """Bucket and key presence checks"""

    def test_valid_location(self):
        """Test bucket and key both present"""
        validate_location("bucket", "key")

    def test_empty_bucket(self):
        with pytest.raises(ValidationError) as exc:
            validate_location("", "key")
        assert "bucket name cannot be empty" in str(exc.value)

    def test_empty_key(self):
        with pytest.raises(ValidationError) as exc:
            validate_location("bucket", "")
        assert "key name cannot be empty" in str(exc.value)

    def test_both_empty_reports_both(self):
        with pytest.raises(ValidationError) as exc:
            validate_location("", "")
        assert len(exc.value.errors) == 2


class TestValidatePathLocation:
    """Locations laid out as a file hierarchy"""

    @pytest.mark.parametrize("key", ["key", "a/b.txt", "deeply/nested/key.bin", "dots.in.name"])
    def test_valid_keys(self, key):
        validate_path_location("bucket", key)

    def test_empty_values_checked_first(self):
        with pytest.raises(ValidationError) as exc:
            validate_path_location("", "key")
        assert "bucket name cannot be empty" in str(exc.value)

    @pytest.mark.parametrize("bucket", ["a/b", ".", ".."])
    def test_bucket_must_be_a_directory_name(self, bucket):
        with pytest.raises(ValidationError) as exc:
            validate_path_location(bucket, "key")
        assert "directory name" in str(exc.value)

    def test_absolute_key(self):
        with pytest.raises(ValidationError) as exc:
            validate_path_location("bucket", "/etc/passwd")
        assert "must not start with" in str(exc.value)

    @pytest.mark.parametrize("key", ["a//b", "a/./b", "../escape", "trailing/"])
    def test_bad_segments(self, key):
        with pytest.raises(ValidationError) as exc:
            validate_path_location("bucket", key)
        assert "path segment" in str(exc.value)
