"""
GraphQL schema for labels and their discussion threads.

Usage:
    query {
        labelsFor(labelable: "RGlzY3Vzc2lvblRocmVhZDox", first: 2) {
            nodes { id name color }
            totalCount
            pageInfo { hasNextPage }
        }
    }
"""
from typing import List, Optional

import strawberry
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from app.api.labels import resolvers
from app.api.labels.labelable import LabelableKind
from app.api.labels.schemas import LabelCreate, LabelUpdate
from app.api.orgs.services import org_by_id
from app.api.threads.services import thread_by_id
from app.graphql import relay
from app.graphql.context import get_context
from app.graphql.types import (
    CreateLabelInput,
    DiscussionThreadType,
    EmptyResponse,
    LabelableType,
    LabelConnectionType,
    LabelType,
    OrgType,
    UpdateLabelInput,
    labelable_from_model,
)


def _ctx(info: Info):
    return info.context["db"], info.context["current_user"]


@strawberry.type
class Query:
    @strawberry.field
    def label(self, info: Info, id: strawberry.ID) -> LabelType:
        db, current_user = _ctx(info)
        return LabelType.from_model(
            resolvers.label_by_id(db, current_user, relay.unmarshal_label_id(id))
        )

    @strawberry.field
    def org(self, info: Info, id: strawberry.ID) -> OrgType:
        db, _ = _ctx(info)
        return OrgType.from_model(org_by_id(db, relay.unmarshal_id(relay.ORG, id)))

    @strawberry.field
    def discussion_thread(self, info: Info, id: strawberry.ID) -> DiscussionThreadType:
        db, _ = _ctx(info)
        thread_id = relay.unmarshal_id(LabelableKind.DISCUSSION_THREAD.value, id)
        return DiscussionThreadType.from_model(thread_by_id(db, thread_id))

    @strawberry.field
    def labels_for(
        self, info: Info, labelable: strawberry.ID, first: Optional[int] = None
    ) -> LabelConnectionType:
        db, current_user = _ctx(info)
        connection = resolvers.labels_for(
            db, current_user, relay.unmarshal_labelable(labelable), first=first
        )
        return LabelConnectionType.from_connection(connection)


@strawberry.type
class Mutation:
    @strawberry.mutation
    def create_label(self, info: Info, input: CreateLabelInput) -> LabelType:
        db, current_user = _ctx(info)
        payload = LabelCreate(
            org_id=relay.unmarshal_id(relay.ORG, input.owner),
            name=input.name,
            description=input.description,
            color=input.color,
        )
        return LabelType.from_model(resolvers.create_label(db, current_user, payload))

    @strawberry.mutation
    def update_label(self, info: Info, input: UpdateLabelInput) -> LabelType:
        db, current_user = _ctx(info)
        payload = LabelUpdate(name=input.name, description=input.description, color=input.color)
        label = resolvers.update_label(
            db, current_user, relay.unmarshal_label_id(input.id), payload
        )
        return LabelType.from_model(label)

    @strawberry.mutation
    def delete_label(self, info: Info, label: strawberry.ID) -> Optional[EmptyResponse]:
        db, current_user = _ctx(info)
        resolvers.delete_label(db, current_user, relay.unmarshal_label_id(label))
        return None

    @strawberry.mutation
    def add_labels_to_labelable(
        self, info: Info, labelable: strawberry.ID, labels: List[strawberry.ID]
    ) -> LabelableType:
        db, current_user = _ctx(info)
        ref = relay.unmarshal_labelable(labelable)
        label_ids = [relay.unmarshal_label_id(label) for label in labels]
        target = resolvers.add_labels_to_labelable(db, current_user, ref, label_ids)
        return labelable_from_model(ref.kind, target)

    @strawberry.mutation
    def remove_labels_from_labelable(
        self, info: Info, labelable: strawberry.ID, labels: List[strawberry.ID]
    ) -> LabelableType:
        db, current_user = _ctx(info)
        ref = relay.unmarshal_labelable(labelable)
        label_ids = [relay.unmarshal_label_id(label) for label in labels]
        target = resolvers.remove_labels_from_labelable(db, current_user, ref, label_ids)
        return labelable_from_model(ref.kind, target)


schema = strawberry.Schema(query=Query, mutation=Mutation, types=[DiscussionThreadType])


def get_graphql_router() -> GraphQLRouter:
    """Get the GraphQL router to mount in FastAPI."""
    return GraphQLRouter(schema, context_getter=get_context)
