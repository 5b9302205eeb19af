from typing import List, Optional

import strawberry
from strawberry.types import Info

from app.api.labels import resolvers
from app.api.labels.connection import LabelConnection
from app.api.labels.labelable import LabelableKind, LabelableRef
from app.api.orgs.services import org_by_id
from app.graphql import relay


@strawberry.type
class PageInfo:
    has_next_page: bool


@strawberry.type
class EmptyResponse:
    always_nil: Optional[str] = None


@strawberry.type(name="Org")
class OrgType:
    id: strawberry.ID
    name: str
    display_name: Optional[str]
    db_id: strawberry.Private[int]

    @classmethod
    def from_model(cls, org) -> "OrgType":
        return cls(
            id=strawberry.ID(relay.marshal_id(relay.ORG, org.id)),
            name=org.name,
            display_name=org.display_name,
            db_id=org.id,
        )

    @strawberry.field(description="Labels owned by this organization.")
    def labels(self, info: Info, first: Optional[int] = None) -> "LabelConnectionType":
        connection = resolvers.org_labels(
            info.context["db"], info.context["current_user"], self.db_id, first=first
        )
        return LabelConnectionType.from_connection(connection)


@strawberry.type(name="Label")
class LabelType:
    id: strawberry.ID
    name: str
    description: Optional[str]
    color: str
    org_id: strawberry.Private[int]

    @classmethod
    def from_model(cls, label) -> "LabelType":
        return cls(
            id=strawberry.ID(relay.marshal_id(relay.LABEL, label.id)),
            name=label.name,
            description=label.description,
            color=label.color,
            org_id=label.org_id,
        )

    @strawberry.field
    def owner(self, info: Info) -> OrgType:
        return OrgType.from_model(org_by_id(info.context["db"], self.org_id))


@strawberry.type(name="LabelConnection")
class LabelConnectionType:
    nodes: List[LabelType]
    total_count: int
    page_info: PageInfo

    @classmethod
    def from_connection(cls, connection: LabelConnection) -> "LabelConnectionType":
        return cls(
            nodes=[LabelType.from_model(label) for label in connection.nodes()],
            total_count=connection.total_count(),
            page_info=PageInfo(has_next_page=connection.has_next_page()),
        )


@strawberry.interface(name="Labelable")
class LabelableType:
    id: strawberry.ID

    def labelable_ref(self) -> LabelableRef:
        raise NotImplementedError

    @strawberry.field
    def labels(self, info: Info, first: Optional[int] = None) -> LabelConnectionType:
        connection = resolvers.labels_for(
            info.context["db"], info.context["current_user"], self.labelable_ref(), first=first
        )
        return LabelConnectionType.from_connection(connection)


@strawberry.type(name="DiscussionThread")
class DiscussionThreadType(LabelableType):
    title: str
    db_id: strawberry.Private[int]

    @classmethod
    def from_model(cls, thread) -> "DiscussionThreadType":
        return cls(
            id=strawberry.ID(relay.marshal_id(LabelableKind.DISCUSSION_THREAD.value, thread.id)),
            title=thread.title,
            db_id=thread.id,
        )

    def labelable_ref(self) -> LabelableRef:
        return LabelableRef(LabelableKind.DISCUSSION_THREAD, self.db_id)


LABELABLE_TYPES = {
    LabelableKind.DISCUSSION_THREAD: DiscussionThreadType,
}


def labelable_from_model(kind: LabelableKind, obj) -> LabelableType:
    return LABELABLE_TYPES[kind].from_model(obj)


@strawberry.input
class CreateLabelInput:
    owner: strawberry.ID
    name: str
    color: str
    description: Optional[str] = None


@strawberry.input
class UpdateLabelInput:
    id: strawberry.ID
    name: Optional[str] = None
    description: Optional[str] = None
    color: Optional[str] = None
