"""Shared fixtures for core unit tests"""

import pytest
from pydantic import BaseModel


class SlugExtra(BaseModel):
    """Extra-fields schema with one required key."""
    slug: str
    active: bool = False


@pytest.fixture(name="slug_extra")
def slug_extra_fixture():
    return SlugExtra
