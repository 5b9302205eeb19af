"""Permission-checked label operations shared by the GraphQL and REST APIs.

Every function takes the caller explicitly as ``current_user`` (``None`` for
anonymous callers). Errors from lookups and the database propagate unchanged.
"""
import logging
from typing import Iterable, Optional, Sequence

from sqlalchemy.orm import Session

from app.api.labels import services
from app.api.labels.connection import LabelConnection
from app.api.labels.labelable import LabelableRef, backend_for
from app.api.labels.schemas import LabelCreate, LabelUpdate
from app.api.orgs.services import org_by_id
from app.core.access import check_org_access
from app.core.errors import NotFoundError
from app.db.models.label import Label
from app.db.models.user import User

logger = logging.getLogger(__name__)


def label_by_id(db: Session, current_user: Optional[User], label_id: int) -> Label:
    label = services.get_label(db, label_id)
    if label is None:
        raise NotFoundError(f"label not found: {label_id}")

    # 🚨 SECURITY: Only organization members and site admins may view labels in an organization.
    check_org_access(db, current_user, label.org_id)
    return label


def labels_for(
    db: Session,
    current_user: Optional[User],
    labelable: LabelableRef,
    first: Optional[int] = None,
) -> LabelConnection:
    backend = backend_for(labelable.kind)
    # 🚨 SECURITY: Any viewer can see which labels are linked to a thread.
    target = backend.resolve(db, labelable.id)
    links = backend.list_links(db, target.id)

    # 🚨 SECURITY: label_by_id checks org access for every label.
    # TODO: anyone can link a private-org label to a public thread, which makes the
    # thread's labels fail to resolve for every non-member; thread and label
    # permissions need a joint model.
    labels = [label_by_id(db, current_user, link.label_id) for link in links]
    return LabelConnection(labels, first=first)


def org_labels(
    db: Session,
    current_user: Optional[User],
    org_id: int,
    first: Optional[int] = None,
) -> LabelConnection:
    org = org_by_id(db, org_id)
    check_org_access(db, current_user, org.id)
    return LabelConnection(services.get_labels(db, org.id), first=first)


def create_label(db: Session, current_user: Optional[User], label: LabelCreate) -> Label:
    owner = org_by_id(db, label.org_id)

    # 🚨 SECURITY: Only organization members and site admins may create labels in an organization.
    check_org_access(db, current_user, owner.id)

    db_label = services.create_label(db, label)
    logger.info("Created label %s in org %s", db_label.id, owner.id)
    return db_label


def update_label(
    db: Session, current_user: Optional[User], label_id: int, label: LabelUpdate
) -> Label:
    existing = label_by_id(db, current_user, label_id)
    updated = services.update_label(db, existing.id, label)
    if updated is None:
        raise NotFoundError(f"label not found: {label_id}")
    logger.info("Updated label %s", updated.id)
    return updated


def delete_label(db: Session, current_user: Optional[User], label_id: int) -> None:
    existing = label_by_id(db, current_user, label_id)
    services.delete_label(db, existing.id)
    logger.info("Deleted label %s", label_id)


def add_labels_to_labelable(
    db: Session, current_user: Optional[User], labelable: LabelableRef, label_ids: Sequence[int]
):
    return _add_remove_labels(db, current_user, labelable, add_label_ids=label_ids)


def remove_labels_from_labelable(
    db: Session, current_user: Optional[User], labelable: LabelableRef, label_ids: Sequence[int]
):
    return _add_remove_labels(db, current_user, labelable, remove_label_ids=label_ids)


def _add_remove_labels(
    db: Session,
    current_user: Optional[User],
    labelable: LabelableRef,
    add_label_ids: Sequence[int] = (),
    remove_label_ids: Sequence[int] = (),
):
    backend = backend_for(labelable.kind)
    # 🚨 SECURITY: Any viewer can add/remove labels to/from a thread.
    target = backend.resolve(db, labelable.id)

    if add_label_ids:
        backend.add_links(db, target.id, _label_db_ids(db, current_user, add_label_ids))
        logger.info("Added labels %s to %s %s", list(add_label_ids), labelable.kind.value, target.id)

    if remove_label_ids:
        backend.remove_links(db, target.id, _label_db_ids(db, current_user, remove_label_ids))
        logger.info("Removed labels %s from %s %s", list(remove_label_ids), labelable.kind.value, target.id)

    return target


def _label_db_ids(db: Session, current_user: Optional[User], label_ids: Iterable[int]) -> list[int]:
    # 🚨 SECURITY: label_by_id checks org access; one failure aborts the whole call.
    return [label_by_id(db, current_user, label_id).id for label_id in label_ids]
