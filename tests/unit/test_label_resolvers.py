"""Tests for the permission-checked label operations."""

import pytest

from app.api.labels import resolvers
from app.api.labels.labelable import LabelableKind, LabelableRef
from app.api.labels.schemas import LabelCreate, LabelUpdate
from app.core.errors import NotFoundError, PermissionDeniedError
from app.db.models.label import Label
from app.db.models.thread_label import ThreadLabel


def thread_ref(thread) -> LabelableRef:
    return LabelableRef(LabelableKind.DISCUSSION_THREAD, thread.id)


def linked_label_ids(db, thread):
    return [link.label_id for link in db.query(ThreadLabel).filter_by(thread_id=thread.id)]


class TestCreateLabel:
    def test_member_creates_label(self, db, seed):
        label = resolvers.create_label(
            db,
            seed.alice,
            LabelCreate(org_id=seed.acme.id, name="bug", description="Broken things", color="#ff0000"),
        )

        assert label.id is not None
        assert label.org_id == seed.acme.id
        assert (label.name, label.description, label.color) == ("bug", "Broken things", "#ff0000")

    def test_site_admin_creates_label_in_any_org(self, db, seed):
        label = resolvers.create_label(
            db, seed.root, LabelCreate(org_id=seed.globex.id, name="ops", color="#00ff00")
        )
        assert label.org_id == seed.globex.id

    def test_non_member_is_denied_and_nothing_is_written(self, db, seed):
        with pytest.raises(PermissionDeniedError):
            resolvers.create_label(
                db, seed.bob, LabelCreate(org_id=seed.acme.id, name="bug", color="#ff0000")
            )
        assert db.query(Label).count() == 0

    def test_unknown_org_is_not_found(self, db, seed):
        with pytest.raises(NotFoundError):
            resolvers.create_label(db, seed.alice, LabelCreate(org_id=999, name="bug", color="#ff0000"))


class TestLabelById:
    def test_member_resolves_label(self, db, seed, make_label):
        label = make_label(seed.acme, "bug")
        assert resolvers.label_by_id(db, seed.alice, label.id).id == label.id

    def test_missing_label_is_not_found(self, db, seed):
        with pytest.raises(NotFoundError, match="label not found"):
            resolvers.label_by_id(db, seed.alice, 42)

    def test_anonymous_is_denied(self, db, seed, make_label):
        label = make_label(seed.acme, "bug")
        with pytest.raises(PermissionDeniedError):
            resolvers.label_by_id(db, None, label.id)


class TestUpdateLabel:
    def test_only_given_fields_change(self, db, seed, make_label):
        label = make_label(seed.acme, "bug", color="#ff0000", description="Broken")

        updated = resolvers.update_label(db, seed.alice, label.id, LabelUpdate(name="defect"))

        assert updated.name == "defect"
        assert updated.color == "#ff0000"
        assert updated.description == "Broken"
        assert updated.org_id == seed.acme.id

    def test_non_member_is_denied_and_label_is_unchanged(self, db, seed, make_label):
        label = make_label(seed.acme, "bug")

        with pytest.raises(PermissionDeniedError):
            resolvers.update_label(db, seed.bob, label.id, LabelUpdate(name="hijacked", color="#000000"))

        db.refresh(label)
        assert label.name == "bug"
        assert label.color == "#336699"


class TestDeleteLabel:
    def test_member_deletes_label_and_its_links(self, db, seed, make_label):
        label = make_label(seed.acme, "bug")
        resolvers.add_labels_to_labelable(db, seed.alice, thread_ref(seed.thread), [label.id])

        assert resolvers.delete_label(db, seed.alice, label.id) is None

        assert db.query(Label).count() == 0
        assert linked_label_ids(db, seed.thread) == []

    def test_non_member_is_denied_and_label_survives(self, db, seed, make_label):
        label = make_label(seed.acme, "bug")

        with pytest.raises(PermissionDeniedError):
            resolvers.delete_label(db, seed.bob, label.id)

        assert db.query(Label).filter_by(id=label.id).count() == 1

    def test_missing_label_is_not_found(self, db, seed):
        with pytest.raises(NotFoundError):
            resolvers.delete_label(db, seed.alice, 7)


class TestLabelsFor:
    def test_first_page_of_thread_labels(self, db, seed, make_label):
        l1, l2, l3 = (make_label(seed.acme, name) for name in ("L1", "L2", "L3"))
        resolvers.add_labels_to_labelable(db, seed.alice, thread_ref(seed.thread), [l3.id, l1.id, l2.id])

        connection = resolvers.labels_for(db, seed.alice, thread_ref(seed.thread), first=2)

        assert [label.name for label in connection.nodes()] == ["L1", "L2"]
        assert connection.total_count() == 3
        assert connection.has_next_page() is True

    def test_thread_without_labels(self, db, seed):
        connection = resolvers.labels_for(db, None, thread_ref(seed.thread))

        assert connection.nodes() == []
        assert connection.total_count() == 0
        assert connection.has_next_page() is False

    def test_unknown_thread_is_not_found(self, db, seed):
        with pytest.raises(NotFoundError, match="discussion thread not found"):
            resolvers.labels_for(db, seed.alice, LabelableRef(LabelableKind.DISCUSSION_THREAD, 404))

    def test_one_unreadable_label_fails_the_whole_list(self, db, seed, make_label):
        acme_label = make_label(seed.acme, "bug")
        globex_label = make_label(seed.globex, "secret")
        resolvers.add_labels_to_labelable(db, seed.root, thread_ref(seed.thread), [acme_label.id, globex_label.id])

        with pytest.raises(PermissionDeniedError):
            resolvers.labels_for(db, seed.alice, thread_ref(seed.thread))


class TestAddRemoveLabels:
    def test_add_links_label_and_returns_thread(self, db, seed, make_label):
        l4 = make_label(seed.acme, "L4")

        thread = resolvers.add_labels_to_labelable(db, seed.alice, thread_ref(seed.thread), [l4.id])

        assert thread.id == seed.thread.id
        labels = resolvers.labels_for(db, seed.alice, thread_ref(seed.thread)).nodes()
        assert [label.id for label in labels] == [l4.id]

    def test_adding_twice_keeps_a_single_link(self, db, seed, make_label):
        label = make_label(seed.acme, "bug")
        ref = thread_ref(seed.thread)

        resolvers.add_labels_to_labelable(db, seed.alice, ref, [label.id, label.id])
        resolvers.add_labels_to_labelable(db, seed.alice, ref, [label.id])

        assert linked_label_ids(db, seed.thread) == [label.id]

    def test_any_resolution_failure_aborts_before_linking(self, db, seed, make_label):
        mine = make_label(seed.acme, "mine")
        theirs = make_label(seed.globex, "theirs")

        with pytest.raises(PermissionDeniedError):
            resolvers.add_labels_to_labelable(db, seed.alice, thread_ref(seed.thread), [mine.id, theirs.id])
        with pytest.raises(NotFoundError):
            resolvers.add_labels_to_labelable(db, seed.alice, thread_ref(seed.thread), [mine.id, 999])

        assert linked_label_ids(db, seed.thread) == []

    def test_remove_unlinks_only_given_labels(self, db, seed, make_label):
        keep = make_label(seed.acme, "keep")
        drop = make_label(seed.acme, "drop")
        ref = thread_ref(seed.thread)
        resolvers.add_labels_to_labelable(db, seed.alice, ref, [keep.id, drop.id])

        thread = resolvers.remove_labels_from_labelable(db, seed.alice, ref, [drop.id])

        assert thread.id == seed.thread.id
        assert linked_label_ids(db, seed.thread) == [keep.id]

    def test_removing_unlinked_label_is_a_no_op(self, db, seed, make_label):
        label = make_label(seed.acme, "bug")
        resolvers.remove_labels_from_labelable(db, seed.alice, thread_ref(seed.thread), [label.id])
        assert linked_label_ids(db, seed.thread) == []


class TestOrgLabels:
    def test_lists_org_labels_for_members(self, db, seed, make_label):
        make_label(seed.acme, "a")
        make_label(seed.acme, "b")
        make_label(seed.globex, "c")

        connection = resolvers.org_labels(db, seed.alice, seed.acme.id, first=1)

        assert [label.name for label in connection.nodes()] == ["a"]
        assert connection.total_count() == 2
        assert connection.has_next_page() is True

    def test_non_member_is_denied(self, db, seed):
        with pytest.raises(PermissionDeniedError):
            resolvers.org_labels(db, seed.bob, seed.acme.id)
