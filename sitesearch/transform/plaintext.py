import re

from bs4 import BeautifulSoup
from markdown_it import MarkdownIt

# Raw HTML in posts is common (embeds, asides), let it through to be stripped
_md = MarkdownIt("commonmark", {"html": True})

_BLANK_LINES = re.compile(r"\n\s*\n+")

def remove_markdown(source: str) -> str:
    """Converts a Markdown body to plain text.

    Block elements end up on their own lines so the result can still be cut
    at a line break.
    """
    if not source:
        return ""

    html = _md.render(source)
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()

    # markdown-it puts a newline after every block, so inline text stays joined
    text = soup.get_text()
    text = "\n".join(line.strip() for line in text.splitlines())
    return _BLANK_LINES.sub("\n\n", text).strip()
