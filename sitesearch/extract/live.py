import os
from datetime import datetime
from typing import Callable, Optional

from ..models import ContentItem

LivePredicate = Callable[[ContentItem], bool]

def is_live(item: ContentItem, now: Optional[datetime] = None, include_drafts: bool = False) -> bool:
    """A post is live once its date has passed, and only if it isn't a draft.

    Posts without a date are treated as live.
    """
    if item.draft and not include_drafts:
        return False
    if item.date is None:
        return True
    return item.date <= (now or datetime.now())

def live_posts(site_env: Optional[str] = None, now: Optional[datetime] = None) -> LivePredicate:
    # Drafts only stay hidden on production builds
    if site_env is None:
        site_env = os.getenv("SITE_ENV", "dev")
    include_drafts = site_env.lower() != "prod"
    return lambda item: is_live(item, now=now, include_drafts=include_drafts)
