import strawberry
from typing import List
from strawberry.types import Info

from glowboard.api.graphql.permissions import IsAuthenticated
from glowboard.api.graphql.settings.types import LocationGoal, LocationSetting


@strawberry.type
class SettingsQuery:
    @strawberry.field(permission_classes=[IsAuthenticated])
    async def location_goals(self, info: Info) -> List[LocationGoal]:
        from glowboard.api.graphql.settings.resolvers import resolve_location_goals
        return await resolve_location_goals(info)

    @strawberry.field(permission_classes=[IsAuthenticated])
    async def location_settings(self, info: Info) -> List[LocationSetting]:
        from glowboard.api.graphql.settings.resolvers import resolve_location_settings
        return await resolve_location_settings(info)

    @strawberry.field(permission_classes=[IsAuthenticated])
    async def location_display_name(self, info: Info, location_id: str) -> str:
        from glowboard.api.graphql.settings.resolvers import resolve_location_display_name
        return await resolve_location_display_name(info, location_id)
