import os
import yaml
from dotenv import load_dotenv
from typing import Any, Dict

from sitesearch.extract.content import ContentCollection
from sitesearch.extract.collections import build_authors, build_newsletters, build_tags, load_data_file
from sitesearch.extract.live import live_posts
from sitesearch.transform.records import DEFAULT_LANG, POST_GLOB, build_search_records
from sitesearch.load.output import write_records

# Load env
load_dotenv()

DRY_RUN = os.getenv("DRY_RUN", "True").lower() == "true"
SITE_CONFIG = os.getenv("SITE_CONFIG", "config/site.yaml")
SITE_ENV = os.getenv("SITE_ENV", "dev")

DEFAULTS = {
    "content_dir": "content",
    "authors_file": "data/authors.yaml",
    "tags_file": "data/tags.yaml",
    "base_url": "",
    "lang": DEFAULT_LANG,
    "post_glob": POST_GLOB,
    "newsletter_glob": "**/newsletter/*/index.md",
    "output": "dist/search-records.json",
}

def load_config(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        raise SystemExit(f"Config file {path} not found. Set SITE_CONFIG or create it.")

    with open(path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    merged = dict(DEFAULTS)
    merged.update({k: v for k, v in config.items() if v is not None})
    return merged

def main():
    print(f"--- Search Records Build Started (DRY_RUN={DRY_RUN}, SITE_ENV={SITE_ENV}) ---")

    config = load_config(SITE_CONFIG)
    is_live = live_posts(SITE_ENV)

    # --- 1. Extract ---
    print("\n[Phase 1] Extraction")
    collection = ContentCollection.from_directory(config["content_dir"], config["base_url"])

    authors = build_authors(collection, load_data_file(config["authors_file"]), is_live, config["base_url"])
    print(f"  - Built {len(authors)} authors")
    tags = build_tags(collection, load_data_file(config["tags_file"]), is_live, config["base_url"])
    print(f"  - Built {len(tags)} tags")
    newsletters = build_newsletters(collection, is_live, config["newsletter_glob"])
    print(f"  - Built {len(newsletters)} newsletters")

    # --- 2. Transform ---
    print("\n[Phase 2] Transformation")
    try:
        records = build_search_records(
            collection,
            authors,
            newsletters,
            tags,
            is_live,
            lang=config["lang"],
            post_glob=config["post_glob"],
        )
    except KeyError as e:
        print(f"  [Build Error] Post references unknown author {e}. Fix the post's front matter.")
        raise

    # Posts are the only records carrying _tags
    post_count = sum(1 for r in records if r.tags is not None)
    print(f"  - Records: {len(records)} ({post_count} posts)")

    # --- 3. Load ---
    print("\n[Phase 3] Output")
    if DRY_RUN:
        print(f"  - [Dry Run] Skipping write to {config['output']}")
    else:
        written = write_records(records, config["output"])
        print(f"  - Wrote {written} records to {config['output']}")

    print("\n--- Search Records Build Finished ---")

if __name__ == "__main__":
    main()
