"""Tests for image element rendering."""

from __future__ import annotations

import pytest

from imgix_url import ImageTarget, to_html, to_html_with_attributes
from imgix_url.options import Width


def test_to_html_has_only_src(target: ImageTarget):
    loaded = target.with_size(Width(pixels=300))
    element = to_html(loaded)
    assert element.tag == "img"
    assert element.attributes == (("src", loaded.to_url()),)
    assert element.src == loaded.to_url()


def test_to_html_with_attributes(target: ImageTarget):
    element = to_html_with_attributes([("alt", "x"), ("class", "hero")], target)
    assert [name for name, _ in element.attributes] == ["src", "alt", "class"]
    assert element.get("alt") == "x"
    assert element.get("width") is None


def test_caller_src_overrides_in_first_position(target: ImageTarget):
    element = to_html_with_attributes(
        [("alt", "x"), ("src", "https://cdn.test/fallback.png")], target
    )
    assert element.attributes[0] == ("src", "https://cdn.test/fallback.png")
    assert len(element.attributes) == 2


def test_render_escapes_attribute_values(target: ImageTarget):
    element = to_html_with_attributes([("alt", 'a "quoted" <tag>')], target)
    assert element.render() == (
        '<img src="https://assets.test/photo.png?auto=" '
        'alt="a &quot;quoted&quot; &lt;tag&gt;">'
    )
    assert str(element) == element.render()


def test_render_escapes_ampersands_in_src(target: ImageTarget):
    html = to_html(target.with_sizes([Width(pixels=1)])).render()
    assert html == '<img src="https://assets.test/photo.png?w=1&amp;auto=">'


@pytest.mark.parametrize(
    "name",
    ['x onerror="alert(1)"', "a>b", "", "1st", "data value"],
)
def test_invalid_attribute_names_rejected(target: ImageTarget, name: str):
    with pytest.raises(ValueError, match="Invalid HTML attribute name"):
        to_html_with_attributes([(name, "y")], target)


def test_namespaced_and_data_attributes_allowed(target: ImageTarget):
    element = to_html_with_attributes(
        [("data-id", "7"), ("xml:lang", "en"), ("aria-label", "x")], target
    )
    assert element.get("data-id") == "7"
    assert element.get("xml:lang") == "en"
