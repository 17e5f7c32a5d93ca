"""Unit tests for resource key classification and construction."""

from __future__ import annotations

import pytest

from stringforge.models.datatypes import PluralValue, PluralValues, SingleValue
from stringforge.resources.builder import (
    KeyBuilder,
    build_key,
    is_plural_family,
    split_compound_tag,
)
from stringforge.text.normalizer import StringNormalizer


def test_plural_form_keys_group_by_locale_in_first_seen_order() -> None:
    raw = {
        "en:one": "%d ruble %d bear and 1 vodka",
        "en:many": "%d rubles %d bears and 1 vodka",
        "ru:one": "%d рубль %d медведь и 1 водка",
        "ru:zero": "нет рублей нет медведей и 1 водка",
        "ru:other": "много рублей много медведей и 2 водки",
    }

    key = build_key("receipt_example", raw)

    assert key.name == "receipt_example"
    assert key.languages == ("en", "ru")
    en_value = key.localizations[0].value
    ru_value = key.localizations[1].value
    assert isinstance(en_value, PluralValues)
    assert isinstance(ru_value, PluralValues)
    assert en_value.quantities == (
        PluralValue(quantity="one", text="%1$d ruble %2$d bear and 1 vodka"),
        PluralValue(quantity="many", text="%1$d rubles %2$d bears and 1 vodka"),
    )
    assert ru_value.quantities == (
        PluralValue(quantity="one", text="%1$d рубль %2$d медведь и 1 водка"),
        PluralValue(quantity="zero", text="нет рублей нет медведей и 1 водка"),
        PluralValue(quantity="other", text="много рублей много медведей и 2 водки"),
    )


def test_interleaved_plural_tags_keep_locale_and_quantity_order() -> None:
    raw = {
        "ru:few": "a",
        "en:one": "b",
        "ru:one": "c",
        "en:other": "d",
    }

    key = build_key("interleaved", raw)

    assert key.languages == ("ru", "en")
    assert [plural.quantity for plural in key.localizations[0].value.quantities] == ["few", "one"]
    assert [plural.quantity for plural in key.localizations[1].value.quantities] == ["one", "other"]


def test_simple_key_keeps_locale_order_and_normalizes_values() -> None:
    key = build_key("greeting", {"ru": "Привет, %@!", "en": "Hello, %@ & %@!"})

    assert key.is_plural is False
    assert [(item.language_code, item.value) for item in key.localizations] == [
        ("ru", SingleValue("Привет, %s!")),
        ("en", SingleValue("Hello, %1$s &amp; %2$s!")),
    ]


def test_absent_values_are_dropped_and_reported(loguru_messages: list[str]) -> None:
    key = build_key("greeting", {"en": "Hello", "ru": None})

    assert key.languages == ("en",)
    assert loguru_messages == ["[skip] key=greeting reason=empty_value tag=ru"]


def test_absent_plural_values_are_dropped_and_reported(loguru_messages: list[str]) -> None:
    key = build_key("apples", {"en:one": "%d apple", "en:other": None})

    assert key.languages == ("en",)
    assert [plural.quantity for plural in key.localizations[0].value.quantities] == ["one"]
    assert loguru_messages == ["[skip] key=apples reason=empty_value tag=en:other"]


def test_plural_classification_is_global_to_the_key(loguru_messages: list[str]) -> None:
    """A bare locale inside a plural family cannot split and is dropped."""

    key = build_key("apples", {"en": "apples", "ru:one": "яблоко"})

    assert key.is_plural is True
    assert key.languages == ("ru",)
    assert loguru_messages == ["[skip] key=apples reason=malformed_compound_tag tag=en"]


def test_plural_locale_with_only_absent_values_is_omitted() -> None:
    key = build_key("apples", {"en:one": None, "ru:one": "яблоко"})

    assert key.languages == ("ru",)


def test_unknown_quantity_tokens_pass_through_verbatim() -> None:
    key = build_key("odd", {"en:lots": "many things", "en:one:extra": "x"})

    quantities = key.localizations[0].value.quantities
    assert [plural.quantity for plural in quantities] == ["lots", "one:extra"]


def test_key_with_no_values_has_no_localizations() -> None:
    key = build_key("empty", {"en": None, "ru": None})

    assert key.localizations == ()


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ({"en": "a", "ru": "b"}, False),
        ({"en": "a", "ru:one": "b"}, True),
        ({}, False),
    ],
)
def test_is_plural_family_checks_any_tag(raw: dict[str, str], expected: bool) -> None:
    assert is_plural_family(raw) is expected


def test_split_compound_tag_uses_first_separator() -> None:
    assert split_compound_tag("en:one") == ("en", "one")
    assert split_compound_tag("en:one:two") == ("en", "one:two")
    assert split_compound_tag("en") is None


def test_key_builder_uses_injected_normalizer() -> None:
    class UpperNormalizer(StringNormalizer):
        def normalize(self, raw: str) -> str:
            return raw.upper()

    key = KeyBuilder(normalizer=UpperNormalizer()).build("shout", {"en": "hey"})

    assert key.localizations[0].value == SingleValue("HEY")
