import strawberry
from typing import Optional


@strawberry.type
class LocationGoal:
    location: str
    sales_goal: float
    retail_goal: float


@strawberry.type
class LocationSetting:
    location_id: str
    custom_name: str
    manager: Optional[str] = ""


@strawberry.input
class LocationGoalInput:
    location: str
    sales_goal: float
    retail_goal: float


@strawberry.input
class LocationSettingInput:
    location_id: str
    custom_name: str
    manager: Optional[str] = ""
