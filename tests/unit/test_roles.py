"""Role partition and normalization."""

import logging

import pytest

from gating.roles import Role, SectionId, is_premium, is_trial_like, normalize_role, normalize_section


@pytest.mark.parametrize("role", list(Role))
def test_every_role_is_in_exactly_one_partition(role):
    assert is_premium(role) != is_trial_like(role)


@pytest.mark.parametrize("role", [Role.MONTHLY, Role.ANNUAL, Role.ADMIN])
def test_premium_roles(role):
    assert is_premium(role)
    assert is_premium(role.value)


@pytest.mark.parametrize("role", [Role.FREE, Role.TRIAL, Role.DOWNSELL])
def test_trial_like_roles(role):
    assert is_trial_like(role)
    assert not is_premium(role)


@pytest.mark.parametrize("raw", ["superuser", "ADMINISTRATOR", "", None, 42, "premium"])
def test_unknown_role_normalizes_to_free(raw):
    assert normalize_role(raw) is Role.FREE
    assert not is_premium(raw)
    assert is_trial_like(raw)


@pytest.mark.parametrize("raw", ["ADMIN", "Admin", " monthly ", "annual\n", "  Annual "])
def test_role_matching_is_exact(raw):
    assert normalize_role(raw) is Role.FREE
    assert not is_premium(raw)


def test_unknown_role_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="gating.roles"):
        normalize_role("owner")
    assert "Unrecognized role" in caplog.text


def test_normalize_section():
    assert normalize_section("s2") is SectionId.PREMIUM
    assert normalize_section(" S3 ") is None
    assert normalize_section("S1") is None
    assert normalize_section("s4") is None
    assert normalize_section(None) is None
