import pytest

from dnskit.zones.preprocessor import preprocess


@pytest.mark.parametrize(
    ("text", "want"),
    [
        ("SOA ( 1 2 3 4 5 6 )", "SOA ( 1 2 3 4 5 6 )"),
        (
            "SOA ( 1 2 ) ( 3 4 ) ( 5 ) ( 6 )\nA 127.0.0.1",
            "SOA ( 1 2 ) ( 3 4 ) ( 5 ) ( 6 )\nA 127.0.0.1",
        ),
        (
            "SOA    soa    soa    ( 1\n2\n3\n4\n5\n6)",
            "SOA    soa    soa    ( 1 2 3 4 5 6)",
        ),
        ("SOA ; blah\nA 127.0.0.1", "SOA ; blah\nA 127.0.0.1"),
        ("SOA (; blah\nA 127.0.0.1)", "SOA (       A 127.0.0.1)"),
        ("SOA ; ( blah\nA 127.0.0.1", "SOA ; ( blah\nA 127.0.0.1"),
    ],
)
def test_preprocess(text, want):
    assert preprocess(text) == want


def test_empty_input():
    assert preprocess("") == ""


def test_length_is_preserved():
    text = "@ IN SOA a b (\n 1 ; serial\n 2 ; refresh\n 3 4 5 )\nNS x\n"
    assert len(preprocess(text)) == len(text)


def test_newline_after_close_is_kept():
    assert preprocess("A (1\n2)\nB") == "A (1 2)\nB"


def test_nested_parentheses():
    assert preprocess("X ((1\n2)\n3)\nY") == "X ((1 2) 3)\nY"


def test_comment_with_close_paren_does_not_close():
    assert preprocess("X (1 ; )\n2)") == "X (1     2)"