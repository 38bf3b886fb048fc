"""Unit tests for option and result records."""

from __future__ import annotations

import pytest

from texthumanizer.models.datatypes import OPTION_FIELDS, HumanizeOptions, HumanizeResult


def test_from_mapping_keeps_base_for_missing_keys() -> None:
    """Merging an empty mapping returns the base options unchanged."""

    base = HumanizeOptions(transform_nbs=False)

    assert HumanizeOptions.from_mapping({}, base=base) is base
    assert HumanizeOptions.from_mapping(None) == HumanizeOptions()


def test_from_mapping_caller_values_win_over_base() -> None:
    """Caller values override both defaults and an explicit base."""

    base = HumanizeOptions(keyboard_only=True)

    merged = HumanizeOptions.from_mapping(
        {"keyboardOnly": False, "transform_hidden": False}, base=base
    )

    assert merged.keyboard_only is False
    assert merged.transform_hidden is False
    assert merged.transform_quotes is True


def test_as_mapping_uses_wire_names_in_rule_order() -> None:
    """Wire mapping should list every flag with its default value."""

    mapping = HumanizeOptions().as_mapping()

    assert list(mapping) == list(OPTION_FIELDS)
    assert mapping["keyboardOnly"] is False
    assert all(mapping[name] for name in OPTION_FIELDS if name != "keyboardOnly")


def test_is_enabled_accepts_both_spellings_and_rejects_unknown_flags() -> None:
    """Flag lookups accept wire and field names only."""

    options = HumanizeOptions(transform_dashes=False)

    assert options.is_enabled("transformDashes") is False
    assert options.is_enabled("transform_dashes") is False
    with pytest.raises(KeyError, match="Unknown option flag"):
        options.is_enabled("transformEverything")


def test_all_disabled_turns_every_flag_off() -> None:
    """The all-disabled factory should clear every flag."""

    assert not any(HumanizeOptions.all_disabled().as_mapping().values())


def test_result_changed_and_dict_form() -> None:
    """Result helpers expose the change indicator and plain mapping form."""

    assert HumanizeResult(text="x", count=2).changed is True
    assert HumanizeResult(text="x", count=0).changed is False
    assert HumanizeResult(text="x", count=0).as_dict() == {"text": "x", "count": 0}
