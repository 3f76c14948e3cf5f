"""GraphQL object and input types.

Field names are snake_case here; graphene exposes them camelCased
(``valor_final`` → ``valorFinal``).
"""

import graphene


class UserType(graphene.ObjectType):
    class Meta:
        name = "User"

    name = graphene.String()
    email = graphene.String()


class AuthPayload(graphene.ObjectType):
    token = graphene.String()
    user = graphene.Field(UserType)


class ItemType(graphene.ObjectType):
    class Meta:
        name = "Item"

    product_id = graphene.Int()
    quantity = graphene.Int()


class CheckoutResultType(graphene.ObjectType):
    class Meta:
        name = "CheckoutResult"

    user_id = graphene.String()
    valor_final = graphene.Float()
    payment_method = graphene.String()
    freight = graphene.Float()
    items = graphene.List(ItemType)


class ItemInput(graphene.InputObjectType):
    product_id = graphene.Int(required=True)
    quantity = graphene.Int(required=True)


class CardDataInput(graphene.InputObjectType):
    number = graphene.String()
    name = graphene.String()
    expiry = graphene.String()
    cvv = graphene.String()
