import datetime
import fnmatch
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import frontmatter
import yaml

from ..models import ContentItem

def page_url(input_path: str, permalink: Any = None) -> Optional[str]:
    """Works out the public URL of a source file.

    `blog/foo/index.md` and `blog/foo.md` both become `/blog/foo/`. A string
    `permalink` in the front matter wins; `permalink: false` means the page is
    never written out, so it has no URL.
    """
    if permalink is False:
        return None
    if isinstance(permalink, str) and permalink:
        return permalink if permalink.startswith("/") else "/" + permalink

    parts = list(Path(input_path).with_suffix("").parts)
    if parts and parts[-1] == "index":
        parts = parts[:-1]
    if not parts:
        return "/"
    return "/" + "/".join(parts) + "/"

def normalize_date(value: Any) -> Optional[datetime.datetime]:
    # YAML gives back plain dates for `date: 2019-09-01`
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(datetime.timezone.utc).replace(tzinfo=None)
        return value
    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time())
    if isinstance(value, str):
        try:
            return normalize_date(datetime.datetime.fromisoformat(value))
        except ValueError:
            print(f"Warning: unreadable date {value!r}, ignoring it.")
    return None

def glob_match(input_path: str, pattern: str) -> bool:
    if fnmatch.fnmatchcase(input_path, pattern):
        return True
    # `**/` also matches zero directories
    if pattern.startswith("**/"):
        return fnmatch.fnmatchcase(input_path, pattern[3:])
    return False

def _text(value: Any) -> Optional[str]:
    # YAML turns `title: 2019` into an int
    return None if value is None else str(value)

def parse_item(input_path: str, text: str, base_url: str = "") -> ContentItem:
    post = frontmatter.loads(text)
    data: Dict[str, Any] = dict(post.metadata or {})

    url = page_url(input_path, data.get("permalink"))
    canonical_url = data.get("canonicalUrl")
    if not canonical_url and url:
        canonical_url = base_url.rstrip("/") + url

    authors = data.get("authors") or []
    if not isinstance(authors, (list, tuple)):
        authors = [authors]

    return ContentItem(
        input_path=input_path,
        url=url,
        title=_text(data.get("title")),
        description=_text(data.get("description")),
        tags=data.get("tags"),
        authors=[str(a) for a in authors],
        canonical_url=canonical_url,
        date=normalize_date(data.get("date")),
        draft=bool(data.get("draft", False)),
        body=post.content,
        data=data,
    )

class ContentCollection:
    """All Markdown sources of the site, in path order."""

    def __init__(self, items: Iterable[ContentItem]):
        self.items: List[ContentItem] = list(items)

    @classmethod
    def from_directory(cls, content_dir: str, base_url: str = "") -> "ContentCollection":
        root = Path(content_dir)
        if not root.is_dir():
            raise SystemExit(f"Content directory {content_dir} does not exist.")

        items = []
        skipped = 0
        for path in sorted(root.rglob("*.md")):
            rel = path.relative_to(root).as_posix()
            try:
                items.append(parse_item(rel, path.read_text(encoding="utf-8"), base_url))
            except (yaml.YAMLError, ValueError) as e:
                print(f"Warning: skipping {rel}, bad front matter: {e}")
                skipped += 1

        print(f"    -> Loaded {len(items)} content files, Skipped {skipped}")
        return cls(items)

    def __iter__(self):
        return iter(self.items)

    def get_filtered_by_glob(self, pattern: str) -> List[ContentItem]:
        return [item for item in self.items if glob_match(item.input_path, pattern)]

    def get_filtered_by_tag(self, tag: str) -> List[ContentItem]:
        return [
            item for item in self.items
            if isinstance(item.tags, (list, tuple)) and tag in item.tags
        ]
