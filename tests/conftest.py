import pytest

from sitesearch.models import CollectionEntry, ContentItem


@pytest.fixture
def make_item():
    """Build a ContentItem with sensible post defaults."""

    def _make(**overrides):
        fields = {
            "input_path": "blog/example/index.md",
            "url": "/example/",
            "title": "Example",
            "tags": ["post"],
            "canonical_url": "/example/",
        }
        fields.update(overrides)
        return ContentItem(**fields)

    return _make


@pytest.fixture
def make_entry():
    def _make(key, prefix="authors", **overrides):
        fields = {
            "key": key,
            "title": key.title(),
            "href": f"/{prefix}/{key}/",
            "canonical_url": f"/{prefix}/{key}/",
        }
        fields.update(overrides)
        return CollectionEntry(**fields)

    return _make


@pytest.fixture
def always_live():
    return lambda item: True
