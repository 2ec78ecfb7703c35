"""
Conftest for storage tests.
"""
import pytest


@pytest.fixture(params=["memory", "local", "s3"])
def store(request):
    """Every backend, so contract tests run against each of them."""
    fixture_name = {
        "memory": "memory_store",
        "local": "local_store",
        "s3": "fake_s3_store",
    }[request.param]
    return request.getfixturevalue(fixture_name)
