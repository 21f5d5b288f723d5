from typing import List

from strawberry.types import Info

from glowboard.api.graphql.resolvers.base import BaseResolver
from glowboard.api.graphql.settings.types import (
    LocationGoal,
    LocationGoalInput,
    LocationSetting,
    LocationSettingInput,
)
from glowboard.schemas import settings as schemas
from glowboard.services.settings_service import LocationSettingsService


class SettingsResolver(BaseResolver):
    @classmethod
    def get_service(cls, info: Info) -> LocationSettingsService:
        return LocationSettingsService(cls.get_store_from_info(info))


async def resolve_location_goals(info: Info) -> List[LocationGoal]:
    goals = await SettingsResolver.get_service(info).load_goals()
    return [LocationGoal(**goal.model_dump()) for goal in goals.goals]


async def resolve_location_settings(info: Info) -> List[LocationSetting]:
    settings = await SettingsResolver.get_service(info).load_settings()
    return [LocationSetting(**setting.model_dump()) for setting in settings.settings]


async def resolve_location_display_name(info: Info, location_id: str) -> str:
    return await SettingsResolver.get_service(info).get_location_display_name(location_id)


async def resolve_save_location_goals(info: Info, goals: List[LocationGoalInput]) -> List[LocationGoal]:
    actor = await SettingsResolver.get_current_user(info)
    saved = await SettingsResolver.get_service(info).save_goals(
        actor,
        schemas.LocationGoals(goals=[
            schemas.LocationGoal(
                location=goal.location,
                sales_goal=goal.sales_goal,
                retail_goal=goal.retail_goal,
            )
            for goal in goals
        ]),
    )
    return [LocationGoal(**goal.model_dump()) for goal in saved.goals]


async def resolve_save_location_settings(
    info: Info,
    settings: List[LocationSettingInput]
) -> List[LocationSetting]:
    actor = await SettingsResolver.get_current_user(info)
    saved = await SettingsResolver.get_service(info).save_settings(
        actor,
        schemas.LocationSettings(settings=[
            schemas.LocationSetting(
                location_id=setting.location_id,
                custom_name=setting.custom_name,
                manager=setting.manager,
            )
            for setting in settings
        ]),
    )
    return [LocationSetting(**setting.model_dump()) for setting in saved.settings]
