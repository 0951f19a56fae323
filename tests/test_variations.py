from urlshort.variations import generate_variations, parse_delimiters


def _oracle(url, delimiters):
    # Fixpoint closure over the same truncation rule, no queue involved
    found = {url}
    grew = True
    while grew:
        grew = False
        for s in list(found):
            for d in delimiters:
                parts = s.split(d)
                for i in range(1, len(parts)):
                    prefix = d.join(parts[:i]) + d
                    if prefix not in found:
                        found.add(prefix)
                        grew = True
    return found


def test_no_delimiter_in_string_yields_original_only():
    assert generate_variations("http://example.com/path", ["=", "&"]) == ["http://example.com/path"]


def test_no_delimiters_configured_yields_original_only():
    assert generate_variations("a=b=c", []) == ["a=b=c"]
    assert generate_variations("a=b=c", ["", ""]) == ["a=b=c"]


def test_simple_prefixes_in_discovery_order():
    got = generate_variations("a=b=c", ["="])
    assert got == ["a=b=c", "a=", "a=b="]
    assert "a=b=c=" not in got


def test_trailing_delimiter_is_absorbed():
    assert generate_variations("a=", ["="]) == ["a="]


def test_recursive_expansion_across_delimiters():
    url = "http://a.com/x=1/y=2"
    got = generate_variations(url, ["=", "/"])
    assert got == [
        "http://a.com/x=1/y=2",
        "http://a.com/x=",
        "http://a.com/x=1/y=",
        "http:/",
        "http://",
        "http://a.com/",
        "http://a.com/x=1/",
    ]


def test_single_char_delimiters_cut_at_every_occurrence():
    url = "http://x.com/a=1/b=2"
    delims = ["=", "/"]
    expected = {url} | {url[: i + 1] for i, ch in enumerate(url) if ch in delims}
    assert set(generate_variations(url, delims)) == expected


def test_matches_oracle_for_multichar_delimiters():
    url = "https://h.io/api/v1/users?id=1&&role=admin&&debug=true"
    delims = ["&&", "=", "/", "?"]
    got = generate_variations(url, delims)
    assert len(got) == len(set(got))
    assert set(got) == _oracle(url, delims)


def test_idempotent_on_own_outputs():
    url = "http://x.com/a=1/b=2"
    delims = ["=", "/"]
    base = set(generate_variations(url, delims))
    for v in base:
        assert set(generate_variations(v, delims)) <= base


def test_parse_delimiters_trims_and_drops_empties():
    assert parse_delimiters(" & , = ,,") == ["&", "="]
    assert parse_delimiters("=,=") == ["="]
    assert parse_delimiters("") == []


def test_parse_delimiters_split_path():
    assert parse_delimiters("=", split_path=True) == ["=", "/"]
    assert parse_delimiters("/,=", split_path=True) == ["/", "="]
