"""GraphQL query and mutation resolvers.

Resolvers call the same services as the REST routes. Domain errors become
GraphQL errors carrying the contractual message and an ``extensions.code``.
"""

from functools import wraps

import graphene
from graphql import GraphQLError

from identity.session.tokens import bearer_token
from ordering.checkout.models import Item
from shared.errors import DomainError

from graphql_api.schemas import (
    AuthPayload,
    CardDataInput,
    CheckoutResultType,
    ItemInput,
    UserType,
)


def domain_errors(resolver):
    @wraps(resolver)
    def wrapper(root, info, **kwargs):
        try:
            return resolver(root, info, **kwargs)
        except DomainError as exc:
            raise GraphQLError(exc.message, extensions={"code": exc.code}) from exc

    return wrapper


def _container(info):
    return info.context["container"]


class Query(graphene.ObjectType):
    users = graphene.List(UserType)

    def resolve_users(root, info):
        return _container(info).auth_service.list_users()


class Mutation(graphene.ObjectType):
    register = graphene.Field(
        UserType,
        args={
            "name": graphene.String(required=True),
            "email": graphene.String(required=True),
            "password": graphene.String(required=True),
        },
    )
    login = graphene.Field(
        AuthPayload,
        args={
            "email": graphene.String(required=True),
            "password": graphene.String(required=True),
        },
    )
    checkout = graphene.Field(
        CheckoutResultType,
        args={
            "items": graphene.List(graphene.NonNull(ItemInput), required=True),
            "freight": graphene.Float(),
            "payment_method": graphene.String(required=True),
            "card_data": CardDataInput(),
        },
    )

    @domain_errors
    def resolve_register(root, info, name, email, password):
        return _container(info).auth_service.register_user(name=name, email=email, password=password)

    @domain_errors
    def resolve_login(root, info, email, password):
        token, user = _container(info).auth_service.login(email=email, password=password)
        return {"token": token, "user": user}

    @domain_errors
    def resolve_checkout(root, info, items, payment_method, freight=0.0, card_data=None):
        authorization = info.context["request"].headers.get("authorization")
        result = _container(info).checkout_service.checkout(
            token=bearer_token(authorization),
            items=[Item(product_id=item.product_id, quantity=item.quantity) for item in items],
            freight=freight if freight is not None else 0.0,
            payment_method=payment_method,
            card_data=dict(card_data) if card_data else None,
        )
        return {
            "user_id": result.user_id,
            "valor_final": result.total,
            "payment_method": result.payment_method,
            "freight": result.freight,
            "items": result.items,
        }


schema = graphene.Schema(query=Query, mutation=Mutation)
