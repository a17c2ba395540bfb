from datetime import datetime

from sitesearch.extract.live import is_live, live_posts

NOW = datetime(2020, 1, 1)


def test_past_post_is_live(make_item):
    assert is_live(make_item(date=datetime(2019, 9, 1)), now=NOW)


def test_future_post_is_not_live(make_item):
    assert not is_live(make_item(date=datetime(2020, 6, 1)), now=NOW)


def test_undated_post_is_live(make_item):
    assert is_live(make_item(), now=NOW)


def test_drafts(make_item):
    draft = make_item(draft=True, date=datetime(2019, 9, 1))

    assert not is_live(draft, now=NOW)
    assert is_live(draft, now=NOW, include_drafts=True)


def test_live_posts_hides_drafts_on_prod_only(make_item):
    draft = make_item(draft=True)

    assert not live_posts("prod", now=NOW)(draft)
    assert live_posts("dev", now=NOW)(draft)


def test_live_posts_reads_env(monkeypatch, make_item):
    monkeypatch.setenv("SITE_ENV", "prod")
    assert not live_posts(now=NOW)(make_item(draft=True))
