import os
from typing import Any, Dict, List

import yaml

from ..models import CollectionEntry, ContentItem
from .content import ContentCollection
from .live import LivePredicate

POST_TAG = "post"

def load_data_file(path: str) -> Dict[str, Any]:
    """Reads a YAML data file keyed by slug. A missing file is an empty mapping."""
    if not path or not os.path.exists(path):
        print(f"Warning: data file {path} not found.")
        return {}

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise SystemExit(f"Data file {path} must be a mapping of key -> entry.")
    return data

def _live_posts(collection: ContentCollection, is_live: LivePredicate) -> List[ContentItem]:
    return [item for item in collection.get_filtered_by_tag(POST_TAG) if is_live(item)]

def _build_entries(
    data: Dict[str, Any],
    prefix: str,
    base_url: str,
    elements_for,
) -> Dict[str, CollectionEntry]:
    entries = {}
    for key, raw in data.items():
        key = str(key)
        raw = raw or {}
        if isinstance(raw, str):
            raw = {"title": raw}
        href = f"/{prefix}/{key}/"
        entries[key] = CollectionEntry(
            key=key,
            title=raw.get("title", key),
            description=raw.get("description"),
            href=href,
            canonical_url=raw.get("canonicalUrl") or base_url.rstrip("/") + href,
            elements=elements_for(key),
        )
    return entries

def build_authors(
    collection: ContentCollection,
    authors_data: Dict[str, Any],
    is_live: LivePredicate,
    base_url: str = "",
) -> Dict[str, CollectionEntry]:
    posts = _live_posts(collection, is_live)
    return _build_entries(
        authors_data, "authors", base_url,
        lambda key: [p for p in posts if key in p.authors],
    )

def build_tags(
    collection: ContentCollection,
    tags_data: Dict[str, Any],
    is_live: LivePredicate,
    base_url: str = "",
) -> Dict[str, CollectionEntry]:
    posts = _live_posts(collection, is_live)
    return _build_entries(
        tags_data, "tags", base_url,
        lambda key: [p for p in posts if key in p.tags],
    )

def build_newsletters(
    collection: ContentCollection,
    is_live: LivePredicate,
    pattern: str = "**/newsletter/*/index.md",
) -> List[ContentItem]:
    newsletters = [item for item in collection.get_filtered_by_glob(pattern) if is_live(item)]
    # Newest first; undated issues sink to the end
    dated = sorted((n for n in newsletters if n.date), key=lambda n: n.date, reverse=True)
    return dated + [n for n in newsletters if not n.date]

def authors_feed(authors: List[CollectionEntry]) -> List[CollectionEntry]:
    """Authors with at least one post, alphabetical."""
    return sorted(
        (a for a in authors if a.elements),
        key=lambda a: (a.title or a.key).lower(),
    )

def tags_feed(tags: List[CollectionEntry]) -> List[CollectionEntry]:
    """Tags with at least one post, busiest first."""
    return sorted(
        (t for t in tags if t.elements),
        key=lambda t: (-len(t.elements), (t.title or t.key).lower()),
    )
