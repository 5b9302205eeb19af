"""Opaque global IDs (base64 of ``Type:dbid``) used by the GraphQL API."""
from strawberry.relay.utils import from_base64, to_base64

from app.api.labels.labelable import LabelableKind, LabelableRef
from app.core.errors import NotFoundError

LABEL = "Label"
ORG = "Org"


def marshal_id(type_name: str, db_id: int) -> str:
    return to_base64(type_name, db_id)


def _unmarshal(global_id: str) -> tuple[str, int]:
    try:
        type_name, raw_id = from_base64(global_id)
        return type_name, int(raw_id)
    except ValueError:
        raise NotFoundError(f"invalid ID: {global_id!r}")


def unmarshal_id(type_name: str, global_id: str) -> int:
    kind, db_id = _unmarshal(global_id)
    if kind != type_name:
        raise NotFoundError(f"{type_name} not found: {global_id!r}")
    return db_id


def unmarshal_label_id(global_id: str) -> int:
    return unmarshal_id(LABEL, global_id)


def unmarshal_labelable(global_id: str) -> LabelableRef:
    kind, db_id = _unmarshal(global_id)
    try:
        return LabelableRef(LabelableKind(kind), db_id)
    except ValueError:
        raise NotFoundError(f"labelable not found: {global_id!r}")
