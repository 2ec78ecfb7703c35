from objstore.storage.exceptions import ValidationError

PATH_SEPARATOR = "/"
RESERVED_SEGMENTS = (".", "..")


def validate_location(bucket: str, key: str) -> None:
    """
    Validate that a bucket and key address an object.

    Rules:
    - Bucket must be a non-empty string
    - Key must be a non-empty string

    Raises:
        ValidationError: When bucket or key is empty
    """
    errors = []

    if not bucket:
        errors.append("bucket name cannot be empty")

    if not key:
        errors.append("key name cannot be empty")

    if errors:
        raise ValidationError(errors)


def validate_path_location(bucket: str, key: str) -> None:
    """
    Validate that a bucket and key can be laid out as a file hierarchy.

    The bucket becomes a top-level directory and the key a path below it,
    so neither may escape that directory or collapse onto another location.

    Rules:
    - Everything validate_location() checks
    - Bucket must not contain a path separator or be "." / ".."
    - Key must not start with a path separator
    - Key segments must not be empty, "." or ".."

    Raises:
        ValidationError: When the location cannot be represented
    """
    validate_location(bucket, key)

    errors = []

    if PATH_SEPARATOR in bucket or bucket in RESERVED_SEGMENTS:
        errors.append(f"bucket name {bucket!r} cannot be used as a directory name")

    if key.startswith(PATH_SEPARATOR):
        errors.append(f"key {key!r} must not start with {PATH_SEPARATOR!r}")
    else:
        segments = key.split(PATH_SEPARATOR)
        if any(not segment or segment in RESERVED_SEGMENTS for segment in segments):
            errors.append(f"key {key!r} contains an empty, '.' or '..' path segment")

    if errors:
        raise ValidationError(errors)
