"""Tests for organization access checks."""

import pytest

from app.core.access import check_org_access, is_org_member
from app.core.errors import PermissionDeniedError


def test_member_is_allowed(db, seed):
    check_org_access(db, seed.alice, seed.acme.id)
    assert is_org_member(db, seed.acme.id, seed.alice.id)


def test_site_admin_is_allowed_without_membership(db, seed):
    assert not is_org_member(db, seed.acme.id, seed.root.id)
    check_org_access(db, seed.root, seed.acme.id)


def test_non_member_is_denied(db, seed):
    with pytest.raises(PermissionDeniedError, match="not an org member"):
        check_org_access(db, seed.bob, seed.acme.id)


def test_anonymous_is_denied(db, seed):
    with pytest.raises(PermissionDeniedError, match="must be authenticated"):
        check_org_access(db, None, seed.acme.id)
