import logging
import pytest

from sortby import Direction, SortToken, parse, format_spec

ASC = Direction.ASCENDING
DESC = Direction.DESCENDING

@pytest.fixture(autouse=True)
def setup_logging(caplog) :
    caplog.set_level(logging.DEBUG, logger="sortby.parser")
    caplog.set_level(logging.DEBUG, logger="sortby.transformer")


def test_empty_spec() :
    assert parse(None) == ()
    assert parse("") == ()
    assert parse("   ") == ()
    assert parse("\t\n") == ()
    assert parse(" , ,, ") == ()

def test_single_field() :
    assert parse("age") == (SortToken("age", ASC),)
    assert parse("  age  ") == (SortToken("age", ASC),)
    assert parse("age", DESC) == (SortToken("age", DESC),)

def test_direction_words() :
    assert parse("age asc") == (SortToken("age", ASC),)
    assert parse("age ascending") == (SortToken("age", ASC),)
    assert parse("age desc") == (SortToken("age", DESC),)
    assert parse("age descending") == (SortToken("age", DESC),)
    assert parse("age asc", DESC) == (SortToken("age", ASC),)

def test_unknown_direction_uses_default() :
    assert parse("age up") == (SortToken("age", ASC),)
    assert parse("age up", DESC) == (SortToken("age", DESC),)
    # case sensitive
    assert parse("age DESC") == (SortToken("age", ASC),)
    assert parse("age Ascending", DESC) == (SortToken("age", DESC),)

def test_extra_words_ignored() :
    assert parse("age desc nulls last") == (SortToken("age", DESC),)

def test_multiple_fields() :
    tokens = parse("lastName desc, age asc, id")
    assert tokens == (
        SortToken("lastName", DESC),
        SortToken("age", ASC),
        SortToken("id", ASC),
    )

def test_empty_segments_dropped() :
    assert parse("a,,b") == parse("a,b")
    assert parse(",a, ,b,") == (SortToken("a", ASC), SortToken("b", ASC))

def test_whitespace_variants() :
    assert parse("a   desc ,\tb\tdesc") == (SortToken("a", DESC), SortToken("b", DESC))
    assert parse("a\ndesc,b") == (SortToken("a", DESC), SortToken("b", ASC))

def test_odd_characters_are_field_names() :
    # field names are not validated by the parser
    assert parse("address.city desc, _id") == (SortToken("address.city", DESC), SortToken("_id", ASC))

def test_default_direction_word() :
    assert parse("age", "desc") == (SortToken("age", DESC),)
    with pytest.raises(ValueError) :
        parse("age", "sideways")

def test_tokens_are_immutable() :
    token = parse("age")[0]
    with pytest.raises(AttributeError) :
        token.field = "name"

def test_format_spec() :
    assert str(SortToken("age", DESC)) == "age desc"
    assert format_spec(parse("age, name descending")) == "age asc, name desc"
    assert format_spec(()) == ""
    assert parse(format_spec(parse("a desc, b, c ascending"))) == parse("a desc, b, c ascending")

def test_parse_logs_tree(caplog) :
    parse("age up")
    assert "Unknown direction 'up'" in caplog.text

def test_unicode_whitespace() :
    assert parse("age\u00a0desc,\u2003name") == (SortToken("age", DESC), SortToken("name", ASC))
