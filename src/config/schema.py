"""Root GraphQL schema served at ``/graphql``."""

import graphene

from modules.customers.schema import Mutation as CustomerMutation
from modules.customers.schema import Query as CustomerQuery


class Query(CustomerQuery, graphene.ObjectType):
    pass


class Mutation(CustomerMutation, graphene.ObjectType):
    pass


schema = graphene.Schema(query=Query, mutation=Mutation)
