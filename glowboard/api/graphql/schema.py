import strawberry

# Import feature queries and mutations
from glowboard.api.graphql.users.queries import UserQuery
from glowboard.api.graphql.users.mutations import UserMutation
from glowboard.api.graphql.sales.queries import SalesQuery
from glowboard.api.graphql.sales.mutations import SalesMutation
from glowboard.api.graphql.analytics.queries import AnalyticsQuery
from glowboard.api.graphql.notes.queries import NoteQuery
from glowboard.api.graphql.notes.mutations import NoteMutation
from glowboard.api.graphql.settings.queries import SettingsQuery
from glowboard.api.graphql.settings.mutations import SettingsMutation


# Define root Query type by combining all feature queries
@strawberry.type
class Query(UserQuery, SalesQuery, AnalyticsQuery, NoteQuery, SettingsQuery):
    pass


# Define root Mutation type by combining all feature mutations
@strawberry.type
class Mutation(UserMutation, SalesMutation, NoteMutation, SettingsMutation):
    pass


schema = strawberry.Schema(query=Query, mutation=Mutation)
