"""Shared fixtures for imgix-url tests."""

from __future__ import annotations

import pytest

from imgix_url import ImageTarget
from imgix_url.encoders import build_default_registry


@pytest.fixture
def registry():
    """Default encoder registry."""
    return build_default_registry()


@pytest.fixture
def target() -> ImageTarget:
    """Empty target for a plain image URL."""
    return ImageTarget.from_string("https://assets.test/photo.png")
