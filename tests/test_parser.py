import pytest

from rawxml.parser import Parser

BOOK = (
    "<book>"
    '<content page_number="12" text="hello">'
    "<maintext>"
    "hello2"
    "</maintext>"
    "</content>"
    "<author>"
    "oscar wilde"
    "</author>"
    "</book>"
    "<mehmet>"
    "jedi"
    "</mehmet>"
)


@pytest.fixture
def book_parser():
    parser = Parser()
    parser.parse(BOOK)
    return parser


def test_sample_tag_and_content(book_parser):
    assert book_parser.get_tag("book", 0) == "content"
    assert book_parser.get_content("book/content/maintext", 0) == "hello2"


def test_children_in_order(book_parser):
    assert book_parser.get_tag("book", 1) == "author"
    assert book_parser.get_tag("book", 2) == ""


def test_attributes_and_children_of_element(book_parser):
    assert book_parser.get_tag("book/content", 0) == "page_number"
    assert book_parser.get_tag("book/content", 1) == "text"
    assert book_parser.get_tag("book/content", 2) == "maintext"


def test_attribute_values(book_parser):
    assert book_parser.get_content("book/content/page_number", 0) == "12"
    assert book_parser.get_content("book/content/text", 0) == "hello"


def test_text_with_spaces(book_parser):
    assert book_parser.get_content("book/author", 0) == "oscar wilde"
    assert book_parser.get_content("mehmet", 0) == "jedi"


def test_top_level_paths(book_parser):
    found = {book_parser.get_tag("", 0), book_parser.get_tag("", 1)}
    assert found == {"book", "mehmet"}
    assert book_parser.get_tag("", 2) == ""


def test_unknown_path_gives_empty(book_parser):
    assert book_parser.get_tag("nothing/here", 0) == ""
    assert book_parser.get_content("nothing", 0) == ""


def test_kinds_are_kept_apart(book_parser):
    assert book_parser.get_content("book", 0) == ""
    assert book_parser.get_tag("mehmet", 0) == ""


def test_negative_index_rejected(book_parser):
    with pytest.raises(ValueError):
        book_parser.get_tag("book", -1)
    with pytest.raises(ValueError):
        book_parser.get_content("book", -1)


def test_repeated_siblings():
    parser = Parser()
    parser.parse("<r><i>1</i><i>2</i></r>")
    assert [parser.get_tag("r", n) for n in range(2)] == ["i", "i"]
    assert [parser.get_content("r/i", n) for n in range(3)] == ["1", "2", ""]


def test_whitespace_inside_content_is_kept():
    parser = Parser()
    parser.parse("<a> x y </a>")
    assert parser.get_content("a", 0) == " x y "


def test_parse_accumulates():
    parser = Parser()
    parser.parse("<a><b>one</b></a>")
    parser.parse("<a><b>two</b></a>")
    assert parser.get_content("a/b", 0) == "one"
    assert parser.get_content("a/b", 1) == "two"
    assert parser.get_tag("a", 1) == "b"