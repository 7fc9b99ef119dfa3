"""Tests for FilterState."""

import dataclasses

import pytest

from storefront.core.filter_state import ALL, FilterState


def test_defaults_are_all():
    state = FilterState()
    assert state.group == ALL
    assert state.family == ALL
    assert state.is_default


def test_with_group_keeps_family():
    state = FilterState(family="floral").with_group("wanita")
    assert state == FilterState(group="wanita", family="floral")


def test_with_family_keeps_group():
    state = FilterState(group="pria").with_family("woody")
    assert state == FilterState(group="pria", family="woody")


def test_setters_do_not_mutate_original():
    original = FilterState()
    original.with_group("pria")
    original.with_family("fresh")
    assert original.is_default


def test_reset():
    state = FilterState(group="pria", family="woody").reset()
    assert state.is_default


def test_state_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        FilterState().group = "pria"  # type: ignore[misc]
