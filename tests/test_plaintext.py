from sitesearch.transform.plaintext import remove_markdown


def test_strips_inline_formatting():
    source = "# Title\n\nSome **bold** and [a link](https://example.com)."
    assert remove_markdown(source) == "Title\nSome bold and a link."


def test_keeps_blocks_on_separate_lines():
    source = "First paragraph.\n\n- one\n- two\n\nLast paragraph."
    lines = remove_markdown(source).splitlines()

    assert lines[0] == "First paragraph."
    assert "one" in lines
    assert "two" in lines
    assert lines[-1] == "Last paragraph."


def test_keeps_code_text():
    source = "```js\nconst a = 1;\n```"
    assert remove_markdown(source) == "const a = 1;"


def test_drops_scripts_and_html_tags():
    source = "<script>alert(1)</script>\n\n<div>Inside</div>\n\nText"
    result = remove_markdown(source)

    assert "alert" not in result
    assert "<div>" not in result
    assert "Inside" in result
    assert result.endswith("Text")


def test_collapses_blank_lines():
    assert "\n\n\n" not in remove_markdown("a\n\n\n\n\nb")


def test_empty_input():
    assert remove_markdown("") == ""
