#!/usr/bin/env python3
"""
Tests for the .properties format handler.

Covers comments, key/value separators, escapes, line continuations,
duplicate keys and namespace nesting.
"""

import pytest

from rbgen.format_handlers import PropertiesHandler, PropertiesSyntaxError


@pytest.fixture
def handler():
    """Fixture to create PropertiesHandler instance."""
    return PropertiesHandler()


def test_simple_parse(handler):
    """Test 1: Parse simple key=value lines, keeping file order."""
    content = "greeting=Hello\nfarewell=Goodbye\n"

    messages = handler.parse(content)

    assert messages == {"greeting": "Hello", "farewell": "Goodbye"}
    assert list(messages) == ["greeting", "farewell"]


def test_comments_and_blank_lines(handler):
    """Test 2: '#' and '!' comments and blank lines are skipped."""
    content = """# Header comment
! Bang comment

   # indented comment
greeting=Hello
"""
    assert handler.parse(content) == {"greeting": "Hello"}


def test_separators(handler):
    """Test 3: '=', ':' and whitespace all separate keys from values."""
    content = """equals=one
colon:two
spaced = three
space four
tabbed\t:\tfive
"""
    messages = handler.parse(content)

    assert messages == {
        "equals": "one",
        "colon": "two",
        "spaced": "three",
        "space": "four",
        "tabbed": "five",
    }


def test_only_first_separator_is_consumed(handler):
    """Test 4: Separators inside the value are kept."""
    messages = handler.parse("url = http://example.com/a=b\nratio==2\n")

    assert messages["url"] == "http://example.com/a=b"
    assert messages["ratio"] == "=2"


def test_key_without_value(handler):
    """Test 5: A key alone on a line maps to an empty string."""
    assert handler.parse("empty\nblank=\n") == {"empty": "", "blank": ""}


def test_escapes(handler):
    """Test 6: Standard escapes and \\uXXXX are resolved."""
    content = r"""tab=a\tb
newline=line1\nline2
cafe=caf\u00e9
path=C:\\temp
literal=\#not a comment
"""
    messages = handler.parse(content)

    assert messages["tab"] == "a\tb"
    assert messages["newline"] == "line1\nline2"
    assert messages["cafe"] == "café"
    assert messages["path"] == "C:\\temp"
    assert messages["literal"] == "#not a comment"


def test_escaped_separator_in_key(handler):
    """Test 7: Escaped separators and spaces belong to the key."""
    content = r"""key\=with\=equals=value
key\ with\ spaces=value2
"""
    messages = handler.parse(content)

    assert messages == {"key=with=equals": "value", "key with spaces": "value2"}


def test_line_continuation(handler):
    """Test 8: Trailing backslash joins the next line, dropping its indent."""
    content = """multiline = first part, \\
              second part
next=ok
"""
    messages = handler.parse(content)

    assert messages["multiline"] == "first part, second part"
    assert messages["next"] == "ok"


def test_even_backslashes_do_not_continue(handler):
    """Test 9: An escaped backslash at end of line is not a continuation."""
    content = "path=C:\\\\\nnext=ok\n"

    messages = handler.parse(content)

    assert messages == {"path": "C:\\", "next": "ok"}


def test_comment_with_trailing_backslash(handler):
    """Test 10: Comment lines never continue."""
    content = "# comment \\\ngreeting=Hello\n"

    assert handler.parse(content) == {"greeting": "Hello"}


def test_duplicate_key_last_wins(handler):
    """Test 11: Later duplicate overwrites in place."""
    messages = handler.parse("a=1\nb=2\na=3\n")

    assert messages == {"a": "3", "b": "2"}
    assert list(messages) == ["a", "b"]


def test_malformed_unicode_escape(handler):
    """Test 12: Bad \\u escape raises a syntax error with the line number."""
    with pytest.raises(PropertiesSyntaxError) as excinfo:
        handler.parse("ok=fine\nbad=\\u12G4\n")

    assert excinfo.value.line == 2
    assert isinstance(excinfo.value, ValueError)


def test_dotted_keys_flat_without_namespaces(handler):
    """Test 13: Without namespaces, dotted keys stay flat."""
    messages = handler.parse("user.login=Log in\nuser.logout=Log out\n")

    assert messages == {"user.login": "Log in", "user.logout": "Log out"}


def test_namespaces(handler):
    """Test 14: With namespaces, dotted keys become nested mappings."""
    content = """title=App
user.login=Log in
user.profile.name=Name
user.logout=Log out
"""
    messages = handler.parse(content, use_namespaces=True)

    assert messages == {
        "title": "App",
        "user": {
            "login": "Log in",
            "profile": {"name": "Name"},
            "logout": "Log out",
        },
    }


def test_namespace_conflicts_later_line_wins(handler):
    """Test 15: Flat value and namespace with the same name - later wins."""
    flat_then_nested = handler.parse("a=flat\na.b=nested\n", use_namespaces=True)
    nested_then_flat = handler.parse("a.b=nested\na=flat\n", use_namespaces=True)

    assert flat_then_nested == {"a": {"b": "nested"}}
    assert nested_then_flat == {"a": "flat"}


def test_matches_and_strip_extension(handler):
    """Test 16: Only *.properties files are recognized."""
    assert handler.matches("fr.properties")
    assert handler.matches("messages_fr_FR.properties")
    assert not handler.matches("fr.json")
    assert not handler.matches("fr.properties.bak")
    assert not handler.matches("properties")

    assert handler.strip_extension("fr.properties") == "fr"
    with pytest.raises(ValueError):
        handler.strip_extension("fr.json")


def test_form_feed_is_separator_not_line_break(handler):
    """Test 17: \\f separates key and value; it never ends a line."""
    assert handler.parse("greeting\fHello\n") == {"greeting": "Hello"}


def test_unicode_line_separators_stay_in_value(handler):
    """Test 18: U+2028, U+2029, \\x85 and \\v are value text, not line breaks."""
    content = "a=x\u2028y\nb=p\u2029q\x85r\vs\n"

    assert handler.parse(content) == {"a": "x\u2028y", "b": "p\u2029q\x85r\vs"}


def test_crlf_and_cr_line_endings(handler):
    """Test 19: \\r\\n and lone \\r end lines like \\n does."""
    content = "a=1\r\nb=2\rc=3\n"

    assert handler.parse(content) == {"a": "1", "b": "2", "c": "3"}


def test_crlf_continuation(handler):
    """Test 20: Continuations work with Windows line endings."""
    content = "multi=one \\\r\n    two\r\nnext=ok\r\n"

    assert handler.parse(content) == {"multi": "one two", "next": "ok"}
