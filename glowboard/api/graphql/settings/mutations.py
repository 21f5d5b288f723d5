import strawberry
from typing import List
from strawberry.types import Info

from glowboard.api.graphql.permissions import IsAdmin
from glowboard.api.graphql.settings.types import (
    LocationGoal,
    LocationGoalInput,
    LocationSetting,
    LocationSettingInput,
)


@strawberry.type
class SettingsMutation:
    @strawberry.mutation(permission_classes=[IsAdmin])
    async def save_location_goals(self, info: Info, goals: List[LocationGoalInput]) -> List[LocationGoal]:
        from glowboard.api.graphql.settings.resolvers import resolve_save_location_goals
        return await resolve_save_location_goals(info, goals)

    @strawberry.mutation(permission_classes=[IsAdmin])
    async def save_location_settings(
        self,
        info: Info,
        settings: List[LocationSettingInput]
    ) -> List[LocationSetting]:
        from glowboard.api.graphql.settings.resolvers import resolve_save_location_settings
        return await resolve_save_location_settings(info, settings)
