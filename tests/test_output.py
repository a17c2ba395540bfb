import json

from sitesearch.load.output import write_records
from sitesearch.models import SearchRecord


def test_write_records(tmp_path):
    records = [
        SearchRecord(object_id="/a/#en", lang="en", title="Á", url="/a/", fulltext="text", authors=[], tags=["post"]),
        SearchRecord(object_id="/authors/x/#en", lang="en", title="X", url="/authors/x/"),
    ]
    path = tmp_path / "dist" / "records.json"

    assert write_records(records, str(path)) == 2

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data[0] == {
        "objectID": "/a/#en",
        "lang": "en",
        "title": "Á",
        "url": "/a/",
        "fulltext": "text",
        "authors": [],
        "_tags": ["post"],
    }
    assert "_tags" not in data[1]
    assert "authors" not in data[1]
    assert "Á" in path.read_text(encoding="utf-8")
