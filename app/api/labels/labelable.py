"""Entities that labels can be attached to.

A labelable is addressed by a ``LabelableRef`` (kind + database ID). Each kind
registers how to load the entity and how to read and write its label links.
Discussion threads are the only kind today.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable

from sqlalchemy.orm import Session

from app.api.labels import services
from app.api.threads.services import thread_by_id
from app.core.errors import NotFoundError


class LabelableKind(str, Enum):
    DISCUSSION_THREAD = "DiscussionThread"


@dataclass(frozen=True)
class LabelableRef:
    kind: LabelableKind
    id: int


@dataclass(frozen=True)
class LabelableBackend:
    resolve: Callable[[Session, int], Any]
    list_links: Callable[[Session, int], list]
    add_links: Callable[[Session, int, Iterable[int]], None]
    remove_links: Callable[[Session, int, Iterable[int]], None]


_BACKENDS = {
    LabelableKind.DISCUSSION_THREAD: LabelableBackend(
        resolve=thread_by_id,
        list_links=services.get_thread_labels,
        add_links=services.add_labels_to_thread,
        remove_links=services.remove_labels_from_thread,
    ),
}


def backend_for(kind: LabelableKind) -> LabelableBackend:
    backend = _BACKENDS.get(kind)
    if backend is None:
        raise NotFoundError(f"not a labelable kind: {kind}")
    return backend


def resolve_labelable(db: Session, ref: LabelableRef):
    return backend_for(ref.kind).resolve(db, ref.id)
