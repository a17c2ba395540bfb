import json
import os
from typing import List

from ..models import SearchRecord

def write_records(records: List[SearchRecord], path: str) -> int:
    """Writes the records as a JSON array for the index upload step."""
    payload = [record.to_json() for record in records]

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)

    return len(payload)
