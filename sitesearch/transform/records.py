from typing import Dict, Iterable, List

from ..extract.collections import authors_feed, tags_feed
from ..extract.content import ContentCollection
from ..extract.live import LivePredicate
from ..models import CollectionEntry, ContentItem, SearchRecord
from .plaintext import remove_markdown

VALID_TAGS = ("post",)
# For now, language is hard-coded to English
DEFAULT_LANG = "en"
POST_GLOB = "**/*.md"

# The search service rejects records over ~10KB of JSON. Trimming fulltext to
# 7500 characters leaves room for the other fields.
FULLTEXT_LIMIT = 7500

def limit_text(fulltext: str, limit: int = FULLTEXT_LIMIT) -> str:
    """Shrinks fulltext to fit within `limit`, cutting at the nearest prior newline.

    Falls back to a hard cut at `limit` when there is no newline to cut at.
    """
    if len(fulltext) <= limit:
        return fulltext

    newline_index = fulltext.rfind("\n", 0, limit + 1)
    if newline_index == -1:
        newline_index = limit
    return fulltext[:newline_index]

def object_id(url: str, lang: str) -> str:
    return f"{url}#{lang}"

def select_posts(items: Iterable[ContentItem], is_live: LivePredicate) -> List[ContentItem]:
    selected = []
    for item in items:
        # Malformed front matter is skipped, not fatal
        if not isinstance(item.tags, (list, tuple)):
            continue
        if not any(tag in VALID_TAGS for tag in item.tags):
            continue
        if not (item.title and item.url):
            continue
        if not is_live(item):
            continue
        selected.append(item)
    return selected

def post_record(
    item: ContentItem,
    authors_collection: Dict[str, CollectionEntry],
    lang: str = DEFAULT_LANG,
) -> SearchRecord:
    # Unknown author keys raise KeyError: the content needs fixing, not the build
    authors = [authors_collection[key].title for key in item.authors]

    return SearchRecord(
        object_id=object_id(item.url, lang),
        lang=lang,
        title=item.title,
        url=item.canonical_url,
        description=item.description,
        fulltext=limit_text(remove_markdown(item.body)),
        authors=authors,
        tags=list(item.tags),
    )

def newsletter_record(item: ContentItem, lang: str = DEFAULT_LANG) -> SearchRecord:
    return SearchRecord(
        object_id=object_id(item.url, lang),
        lang=lang,
        title=item.title,
        url=item.canonical_url,
        description=item.description,
        fulltext=limit_text(remove_markdown(item.body)),
    )

def entry_record(entry: CollectionEntry, lang: str = DEFAULT_LANG) -> SearchRecord:
    """Author and tag pages only have their description as free text."""
    return SearchRecord(
        object_id=object_id(entry.href, lang),
        lang=lang,
        title=entry.title,
        url=entry.canonical_url,
        description=entry.description,
        fulltext=limit_text(entry.description or ""),
    )

author_record = entry_record
tag_record = entry_record

def build_search_records(
    collection: ContentCollection,
    authors_collection: Dict[str, CollectionEntry],
    newsletters_collection: List[ContentItem],
    tags_collection: Dict[str, CollectionEntry],
    is_live: LivePredicate,
    lang: str = DEFAULT_LANG,
    post_glob: str = POST_GLOB,
) -> List[SearchRecord]:
    """Flattens the site into search records: posts, authors, newsletters, tags."""
    eligible = select_posts(collection.get_filtered_by_glob(post_glob), is_live)

    posts = [post_record(item, authors_collection, lang) for item in eligible]
    authors = [author_record(a, lang) for a in authors_feed(list(authors_collection.values()))]
    newsletters = [newsletter_record(n, lang) for n in newsletters_collection]
    tags = [tag_record(t, lang) for t in tags_feed(list(tags_collection.values()))]

    return posts + authors + newsletters + tags
