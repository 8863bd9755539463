"""Tests for tejido.attributes — attribute map rendering."""

from hypothesis import given
from hypothesis import strategies as st

from tejido.attributes import format_attributes

attr_names = st.text(alphabet="abcdefghijklmnopqrstuvwxyz-_", min_size=1, max_size=8)
attr_values = st.one_of(st.none(), st.text(max_size=10))
attr_maps = st.dictionaries(attr_names, attr_values, max_size=6)


class TestFormatAttributes:
    def test_none(self) -> None:
        assert format_attributes(None) == ""

    def test_empty_map(self) -> None:
        assert format_attributes({}) == ""

    def test_single(self) -> None:
        assert format_attributes({"class": "x"}) == ' class="x"'

    def test_sorted_by_key(self) -> None:
        assert format_attributes({"title": "t", "href": "/", "class": "c"}) == (
            ' class="c" href="/" title="t"'
        )

    def test_none_value_omitted(self) -> None:
        assert format_attributes({"id": None, "class": "x"}) == ' class="x"'

    def test_all_none(self) -> None:
        assert format_attributes({"id": None}) == ""

    def test_empty_string_value_kept(self) -> None:
        assert format_attributes({"alt": ""}) == ' alt=""'

    def test_value_escaped_preserving_entities(self) -> None:
        assert format_attributes({"title": 'a "b" & &copy; <c>'}) == (
            ' title="a &quot;b&quot; &amp; &copy; &lt;c&gt;"'
        )

    def test_prefix_keys_ordered_by_key(self) -> None:
        assert format_attributes({"data-x": "2", "data": "1"}) == ' data="1" data-x="2"'


class TestFormatAttributesProperties:
    @given(attr_maps)
    def test_insertion_order_irrelevant(self, attrs: dict[str, str | None]) -> None:
        reversed_attrs = dict(reversed(list(attrs.items())))
        assert format_attributes(attrs) == format_attributes(reversed_attrs)

    @given(attr_maps)
    def test_none_values_never_rendered(self, attrs: dict[str, str | None]) -> None:
        rendered = format_attributes(attrs)
        expected = sum(1 for v in attrs.values() if v is not None)
        assert rendered.count('="') == expected
