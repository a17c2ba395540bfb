from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional
from datetime import datetime

class ContentItem(BaseModel):
    input_path: str = Field(..., description="Path relative to the content root, posix separators")
    url: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    # Raw front-matter value, not validated: malformed tags are filtered out later
    tags: Any = None
    authors: List[str] = []
    canonical_url: Optional[str] = None
    date: Optional[datetime] = None
    draft: bool = False
    body: str = ""
    data: Dict[str, Any] = {}

class CollectionEntry(BaseModel):
    """A shaped author or tag page."""
    key: str
    title: Optional[str] = None
    description: Optional[str] = None
    href: str
    canonical_url: Optional[str] = None
    elements: List[ContentItem] = []

class SearchRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    object_id: str = Field(..., alias="objectID", description="<url>#<lang>")
    lang: str
    title: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    fulltext: str = ""

    # Posts only
    authors: Optional[List[Optional[str]]] = None
    tags: Optional[List[Any]] = Field(None, alias="_tags")

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
