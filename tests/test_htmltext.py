import pytest

from dsalgos.htmltext import strip_tags


def test_strip_tags_source_example():
    assert strip_tags("     <h1> hemant is great     <h2>     ") == "hemant is great"


@pytest.mark.parametrize("text", ["plain words", "a", "x y z"])
def test_text_without_tags_is_unchanged(text):
    assert strip_tags(text) == text


@pytest.mark.parametrize(
    "markup",
    ["<p>one</p>", "<b>bold</b> and <i>italic</i>", "<div class='x'><span>deep</span></div>"],
)
def test_no_brackets_survive(markup):
    result = strip_tags(markup)
    assert "<" not in result
    assert ">" not in result


def test_tag_contents_removed_and_text_kept():
    result = strip_tags("<title>hidden</title>shown")
    assert "title" not in result
    assert result.endswith("shown")


def test_only_spaces_are_trimmed():
    assert strip_tags("\tx\t") == "\tx\t"


def test_only_tags_gives_empty_string():
    assert strip_tags("   <br>   <hr>  ") == ""


def test_result_has_no_edge_spaces():
    result = strip_tags("  <a> link text </a>  ")
    assert result == result.strip(" ")
    assert "link text" in result