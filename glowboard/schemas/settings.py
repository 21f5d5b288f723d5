from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from glowboard.core.config import get_settings
from glowboard.core.constants import LOCATIONS


class LocationGoal(BaseModel):
    location: str
    sales_goal: float
    retail_goal: float


class LocationGoals(BaseModel):
    """Monthly targets for every location, passed explicitly to goal tracking."""
    goals: List[LocationGoal] = Field(default_factory=list)

    @classmethod
    def defaults(cls) -> "LocationGoals":
        settings = get_settings()
        return cls(goals=[
            LocationGoal(
                location=location,
                sales_goal=settings.DEFAULT_SALES_GOAL,
                retail_goal=settings.DEFAULT_RETAIL_GOAL,
            )
            for location in LOCATIONS
        ])

    def for_location(self, location: str) -> LocationGoal:
        """Goals of one location; missing or zero targets fall back to the defaults."""
        settings = get_settings()
        goal = next((g for g in self.goals if g.location == location), None)
        return LocationGoal(
            location=location,
            sales_goal=(goal.sales_goal if goal else 0) or settings.DEFAULT_SALES_GOAL,
            retail_goal=(goal.retail_goal if goal else 0) or settings.DEFAULT_RETAIL_GOAL,
        )

    def totals(self) -> Tuple[float, float]:
        """Sum of (sales_goal, retail_goal) across all configured locations."""
        return (
            sum(g.sales_goal for g in self.goals),
            sum(g.retail_goal for g in self.goals),
        )


class LocationSetting(BaseModel):
    location_id: str
    custom_name: str
    manager: Optional[str] = ""


class LocationSettings(BaseModel):
    settings: List[LocationSetting] = Field(default_factory=list)

    @classmethod
    def defaults(cls) -> "LocationSettings":
        return cls(settings=[
            LocationSetting(location_id=location, custom_name=location, manager="")
            for location in LOCATIONS
        ])

    def display_name(self, location_id: str) -> str:
        setting = next((s for s in self.settings if s.location_id == location_id), None)
        return (setting.custom_name if setting else None) or location_id
