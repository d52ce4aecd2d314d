from asyncwebcli.cli.parser import Line, parse_lines, parse_words


def test_words_split_on_spaces():
    assert parse_words("ping -c 3") == ["ping", "-c", "3"]


def test_repeated_spaces_produce_no_empty_words():
    assert parse_words("  a   b  ") == ["a", "b"]


def test_empty_text_has_no_words():
    assert parse_words("") == []


def test_quoted_words_keep_spaces_and_quotes():
    assert parse_words('say "hello world" now') == ["say", '"hello world"', "now"]


def test_escaped_space_does_not_split():
    assert parse_words("a\\ b c") == ["a\\ b", "c"]


def test_escaped_quote_does_not_open_quote():
    assert parse_words('a \\"b c') == ["a", '\\"b', "c"]


def test_lines_split_on_newlines():
    lines = parse_lines("first\nsecond\r\nthird")
    assert [line.text for line in lines] == ["first", "second", "third"]


def test_double_semicolon_splits_lines():
    lines = parse_lines("a x;;b y")
    assert [line.words for line in lines] == [("a", "x"), ("b", "y")]


def test_single_semicolon_does_not_split():
    lines = parse_lines("a;b")
    assert [line.text for line in lines] == ["a;b"]


def test_quoted_delimiters_are_kept():
    text = 'echo "x;;y\nz"'
    lines = parse_lines(text)
    assert [line.text for line in lines] == [text]


def test_escaped_delimiter_is_kept():
    text = "a\\;;b"
    lines = parse_lines(text)
    assert [line.text for line in lines] == [text]


def test_empty_input_has_no_lines():
    assert parse_lines("") == []
    assert parse_lines("\r\n\n") == []


def test_line_carries_words():
    lines = parse_lines("set -name x")
    assert lines == [Line(text="set -name x", words=("set", "-name", "x"), offsets=(0, 4, 10))]


def test_offsets_point_at_words():
    for line in parse_lines('  cmd  "a b"  c\\ d\nnext one'):
        assert len(line.words) == len(line.offsets)
        for word, offset in zip(line.words, line.offsets):
            assert line.text[offset:offset + len(word)] == word


def test_lines_agree_with_parse_words():
    text = "one two;;three four\nfive"
    for line in parse_lines(text):
        assert list(line.words) == parse_words(line.text)