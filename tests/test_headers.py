import pytest

from fresh import Headers, etags_match, has_no_cache, parse_token_list


@pytest.mark.parametrize(
    "value, expected",
    [
        pytest.param("a, b,c", ["a", "b", "c"], id="mixed_spacing"),
        pytest.param("a,,b", ["a", "b"], id="empty_gap_dropped"),
        pytest.param("a, , ,b", ["a", "b"], id="blank_gap_dropped"),
        pytest.param("", [], id="empty"),
        pytest.param("  a  ", ["a"], id="surrounding_spaces"),
        pytest.param(",", [], id="lone_comma"),
        pytest.param("a b, c", ["a b", "c"], id="inner_space_kept"),
        pytest.param("a,a", ["a", "a"], id="duplicates_kept"),
        pytest.param('"foo", W/"bar"', ['"foo"', 'W/"bar"'], id="entity_tags"),
    ],
)
def test_parse_token_list(value, expected):
    assert parse_token_list(value) == expected


def test_parse_token_list_only_strips_spaces():
    assert parse_token_list("\ta\t, b") == ["\ta\t", "b"]


@pytest.mark.parametrize("tag", ['"foo"', "foo", '""'])
def test_weak_comparison_symmetry(tag: str) -> None:
    weak = "W/" + tag
    assert etags_match(tag, tag)
    assert etags_match(tag, weak)
    assert etags_match(weak, tag)
    assert etags_match(weak, weak)


def test_different_etags_do_not_match():
    assert not etags_match('"foo"', '"bar"')
    assert not etags_match('W/"foo"', 'W/"bar"')
    assert not etags_match('"foo"', 'W/W/"foo"')


@pytest.mark.parametrize(
    "cache_control",
    [
        "no-cache",
        "max-age=0, no-cache",
        "no-cache, no-store",
        "public,no-cache,max-age=0",
        " no-cache ",
    ],
)
def test_has_no_cache(cache_control):
    assert has_no_cache(cache_control)


@pytest.mark.parametrize(
    "cache_control",
    [
        "",
        "max-age=0",
        "no-store",
        'no-cache="set-cookie"',
        "xno-cache",
        "no-cache-extension",
    ],
)
def test_has_no_cache_negative(cache_control):
    assert not has_no_cache(cache_control)


def test_headers_are_case_insensitive():
    headers = Headers({"ETag": '"foo"'})

    assert headers["etag"] == '"foo"'
    assert headers["ETAG"] == '"foo"'
    assert headers.get("Etag") == '"foo"'
    assert "eTag" in headers
    assert list(headers) == ["etag"]


def test_headers_join_repeated_values():
    headers = Headers({"If-None-Match": ['"a"', '"b"']})

    assert headers["if-none-match"] == '"a", "b"'
    assert headers.get_list("If-None-Match") == ['"a"', '"b"']


def test_headers_keep_empty_values():
    headers = Headers({"If-None-Match": ""})

    assert "if-none-match" in headers
    assert headers["if-none-match"] == ""
    assert headers.get("if-modified-since") is None


def test_headers_from_raw():
    headers = Headers.from_raw(
        [
            (b"If-None-Match", b'"a"'),
            (b"if-none-match", b'"b"'),
            (b"Cache-Control", b"max-age=0"),
        ]
    )

    assert headers == Headers({"if-none-match": ['"a"', '"b"'], "cache-control": "max-age=0"})
    assert len(headers) == 2


def test_headers_are_read_only():
    headers = Headers({"ETag": '"foo"'})

    with pytest.raises(TypeError):
        headers["etag"] = '"bar"'  # type: ignore[index]

    values = headers.get_list("etag")
    assert values is not None
    values.append('"bar"')
    assert headers["etag"] == '"foo"'


def test_headers_repr():
    assert repr(Headers({"ETag": '"foo"'})) == "Headers({'etag': ['\"foo\"']})"
