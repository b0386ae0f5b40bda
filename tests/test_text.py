import pytest
from halberd.utils.text import escape_xml, singularize, to_text


def test_escape_xml_order_and_scope():
    assert escape_xml('"<a>"') == "&quot;&lt;a&gt;&quot;"
    # ampersands are not touched
    assert escape_xml("/orders?page=2&size=5") == "/orders?page=2&size=5"


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, "true"),
        (False, "false"),
        (None, "null"),
        (30.0, "30"),
        (30.5, "30.5"),
        (14, "14"),
        ("USD", "USD"),
        ([1, "a", None], "1,a,"),
        ({"a": 1}, '{"a":1}'),
    ],
)
def test_to_text(value, expected):
    assert to_text(value) == expected


def test_singularize_strips_one_trailing_s():
    assert singularize("orders") == "order"
    assert singularize("address") == "addres"
    assert singularize("people") == "people"
    assert singularize("") == ""
