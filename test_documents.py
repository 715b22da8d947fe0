import pytest

from lan_sim.core.node import parse_document


@pytest.mark.parametrize(
    "message, author, title",
    [
        ("!PS author:Bob.title:Report.", "Bob", "Report"),
        ("!PS title:OnlyTitle.", "Unknown", "OnlyTitle"),
        ("!PS", "Unknown", "Untitled"),
        ("!PS Hello World in postscript", "Unknown", "Untitled"),
        ("!PS author:Bob", "Bob", "Untitled"),
        ("!PS title:Report.author:Alice.", "Alice", "Report"),
    ],
)
def test_postscript_metadata(message, author, title):
    info = parse_document(message)
    assert info.postscript
    assert info.author == author
    assert info.title == title


def test_postscript_fields_searched_independently():
    info = parse_document("!PS author:title:X.")
    assert info.author == "title:X"
    assert info.title == "X"


def test_postscript_prefix_must_lead():
    info = parse_document(" !PS author:Bob.")
    assert not info.postscript
    assert info.title == "ASCII DOCUMENT"


@pytest.mark.parametrize(
    "message, author",
    [
        ("Hello World", "Unknown"),
        ("0123456789abcde", "Unknown"),
        ("0123456789abcdef", "89abcdef"),
        ("Hello World, this is Bart", "rld, thi"),
        ("", "Unknown"),
    ],
)
def test_ascii_metadata(message, author):
    info = parse_document(message)
    assert not info.postscript
    assert info.author == author
    assert info.title == "ASCII DOCUMENT"
