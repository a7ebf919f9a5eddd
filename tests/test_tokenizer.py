from annoquery.query.tokenizer import remove_surrounding_quotes, split_term, tokenize


def test_tokenize_splits_on_whitespace():
    assert tokenize("foo  bar\tbaz\n qux") == ["foo", "bar", "baz", "qux"]


def test_tokenize_empty_and_blank():
    assert tokenize("") == []
    assert tokenize("   \t\n") == []


def test_tokenize_quoted_phrases():
    assert tokenize("'single quoted' unquoted") == ["single quoted", "unquoted"]
    assert tokenize('"double  quoted" x') == ["double  quoted", "x"]


def test_tokenize_strips_quotes_from_field_values():
    assert tokenize('tag:"foo bar" baz') == ["tag:foo bar", "baz"]
    assert tokenize("user:'jane doe'") == ["user:jane doe"]


def test_tokenize_merges_adjacent_pieces_into_one_run():
    assert tokenize('foo"bar baz"qux next') == ['foo"bar baz"qux', "next"]
    assert tokenize("'a b'\"c d\" e") == ["'a b'\"c d\"", "e"]


def test_tokenize_keeps_quotes_on_unrecognized_field_values():
    assert tokenize('example:"foo bar"') == ['example:"foo bar"']


def test_tokenize_drops_empty_quotes():
    assert tokenize('"" \'\' foo') == ["foo"]


def test_tokenize_unterminated_quote_ends_run():
    assert tokenize('foo"bar') == ["foo", "bar"]
    assert tokenize("it's here") == ["it", "s", "here"]


def test_tokenize_bare_token_is_stable():
    for token in ("foo", "tag:bar", "example:text", "a-b_c.d"):
        assert tokenize(token) == [token]
        assert tokenize(tokenize(token)[0]) == [token]


def test_remove_surrounding_quotes():
    assert remove_surrounding_quotes("'foo'") == "foo"
    assert remove_surrounding_quotes('"bar"') == "bar"
    assert remove_surrounding_quotes("'foo\"") == "'foo\""
    assert remove_surrounding_quotes('bar"') == 'bar"'
    assert remove_surrounding_quotes('"') == '"'


def test_split_term_recognized_fields():
    assert split_term("user:johndoe") == ("user", "johndoe")
    assert split_term("group:abc") == ("group", "abc")
    assert split_term("uri:http://example.com/a") == ("uri", "http://example.com/a")
    assert split_term("tag:") == ("tag", "")


def test_split_term_unrecognized_or_missing_field():
    assert split_term("example:text") == (None, "example:text")
    assert split_term("User:johndoe") == (None, "User:johndoe")
    assert split_term(":foo") == (None, ":foo")
    assert split_term("tags") == (None, "tags")
    assert split_term("plain") == (None, "plain")


def test_tokenize_whitespace_set():
    assert tokenize("a\u00a0b\u3000c\ufeffd\u2028e") == ["a", "b", "c", "d", "e"]
    # control separators and NEL are not whitespace here
    assert tokenize("a\x1cb c\x85d") == ["a\x1cb", "c\x85d"]
