"""Tests for the family encoders and the encoder registry."""

from __future__ import annotations

import pytest

from imgix_url import (
    EncoderNotFoundError,
    EncoderRegistry,
    ImgixUrlConfig,
    ListMergeEncoder,
    OptionFamily,
    QueryPair,
    RepeatedKeyEncoder,
    SingleKeyEncoder,
    SingletonEncoder,
    build_default_registry,
)
from imgix_url.options import (
    Auto,
    AutoMode,
    Blur,
    Brightness,
    Contrast,
    Crop,
    CropMode,
    Flip,
    FlipAxis,
    Height,
    Invert,
    Width,
)

H = Flip(axis=FlipAxis.HORIZONTAL)
V = Flip(axis=FlipAxis.VERTICAL)

# -- ListMergeEncoder -----------------------------------------------------------


class TestListMerge:
    def test_empty_input_is_omitted(self):
        assert ListMergeEncoder(OptionFamily.SIZE).encode([]) == []

    def test_distinct_keys_become_separate_pairs(self):
        pairs = ListMergeEncoder(OptionFamily.SIZE).encode(
            [Width(pixels=300), Height(pixels=200)]
        )
        assert pairs == [QueryPair("w", "300"), QueryPair("h", "200")]

    def test_same_key_joined_in_application_order(self):
        pairs = ListMergeEncoder(OptionFamily.SIZE).encode(
            [Width(pixels=300), Height(pixels=200), Width(pixels=400)]
        )
        assert pairs == [QueryPair("w", "300,400"), QueryPair("h", "200")]

    def test_order_sensitive(self):
        encoder = ListMergeEncoder(OptionFamily.SIZE)
        a = encoder.encode([Crop(mode=CropMode.TOP), Crop(mode=CropMode.LEFT)])
        b = encoder.encode([Crop(mode=CropMode.LEFT), Crop(mode=CropMode.TOP)])
        assert a == [QueryPair("crop", "top,left")]
        assert b == [QueryPair("crop", "left,top")]

    def test_repeated_flag_collapses(self):
        pairs = ListMergeEncoder(OptionFamily.ADJUSTMENT).encode(
            [Invert(), Brightness(amount=5), Invert()]
        )
        assert pairs == [QueryPair("invert", "true"), QueryPair("bri", "5")]

    def test_custom_separator(self):
        encoder = ListMergeEncoder(OptionFamily.ADJUSTMENT, separator="|")
        pairs = encoder.encode([Brightness(amount=10), Brightness(amount=20)])
        assert pairs == [QueryPair("bri", "10|20")]


# -- SingleKeyEncoder -----------------------------------------------------------


class TestSingleKey:
    def test_empty_input_is_omitted(self):
        assert SingleKeyEncoder(OptionFamily.ROTATION, "flip").encode([]) == []

    def test_collapses_into_one_key(self):
        pairs = SingleKeyEncoder(OptionFamily.ROTATION, "flip").encode([V, H, V])
        assert pairs == [QueryPair("flip", "v,h,v")]


# -- SingletonEncoder -----------------------------------------------------------


class TestSingleton:
    def test_always_emits_key(self):
        encoder = SingletonEncoder(OptionFamily.AUTOMATIC, "auto")
        assert encoder.encode([]) == [QueryPair("auto", "")]

    def test_can_skip_empty(self):
        encoder = SingletonEncoder(OptionFamily.AUTOMATIC, "auto", always_emit=False)
        assert encoder.encode([]) == []

    def test_tokens_deduplicated(self):
        encoder = SingletonEncoder(OptionFamily.AUTOMATIC, "auto")
        pairs = encoder.encode(
            [
                Auto(mode=AutoMode.FORMAT),
                Auto(mode=AutoMode.ENHANCE),
                Auto(mode=AutoMode.FORMAT),
            ]
        )
        assert pairs == [QueryPair("auto", "format,enhance")]


# -- RepeatedKeyEncoder ---------------------------------------------------------


def test_repeated_key_keeps_every_value():
    encoder = RepeatedKeyEncoder(OptionFamily.STYLIZE)
    pairs = encoder.encode([Blur(amount=10), Blur(amount=20)])
    assert pairs == [QueryPair("blur", "10"), QueryPair("blur", "20")]


# -- Registry -------------------------------------------------------------------


class TestRegistry:
    def test_default_covers_every_family(self, registry: EncoderRegistry):
        assert registry.supported_families == set(OptionFamily)

    def test_default_registries_are_independent(self):
        first = build_default_registry()
        second = build_default_registry()
        first.unregister(OptionFamily.SIZE)
        assert not first.has(OptionFamily.SIZE)
        assert second.has(OptionFamily.SIZE)

    def test_missing_encoder_raises(self):
        with pytest.raises(EncoderNotFoundError) as exc_info:
            EncoderRegistry().encode(OptionFamily.SIZE, [])
        assert exc_info.value.family is OptionFamily.SIZE

    def test_register_replaces(self, registry: EncoderRegistry):
        registry.register(RepeatedKeyEncoder(OptionFamily.ADJUSTMENT))
        pairs = registry.encode(
            OptionFamily.ADJUSTMENT, [Contrast(amount=5), Contrast(amount=6)]
        )
        assert pairs == [QueryPair("con", "5"), QueryPair("con", "6")]

    def test_get_unknown_returns_none(self):
        assert EncoderRegistry().get(OptionFamily.STYLIZE) is None

    def test_config_disables_empty_automatic(self):
        registry = build_default_registry(ImgixUrlConfig(emit_empty_automatic=False))
        assert registry.encode(OptionFamily.AUTOMATIC, []) == []

    def test_config_separator(self):
        registry = build_default_registry(ImgixUrlConfig(list_separator=";"))
        assert registry.encode(OptionFamily.ROTATION, [H, V]) == [
            QueryPair("flip", "h;v")
        ]
