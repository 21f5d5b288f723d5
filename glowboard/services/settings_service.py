import logging

from glowboard.core.constants import LOCATION_GOALS_KEY, LOCATION_SETTINGS_KEY
from glowboard.core.exceptions import GatewayError
from glowboard.db.document_store import DocumentStore
from glowboard.schemas.settings import LocationGoals, LocationSettings
from glowboard.schemas.user import User
from glowboard.services.permissions import require_admin

logger = logging.getLogger(__name__)


class LocationSettingsService:
    """Per-location goals and display settings kept as singleton documents.

    A missing document is initialized with the defaults on first load. A
    failed read falls back to the defaults without writing anything.
    """

    def __init__(self, store: DocumentStore):
        self.store = store

    async def load_goals(self) -> LocationGoals:
        try:
            value = await self.store.get_setting(LOCATION_GOALS_KEY)
        except Exception as e:
            logger.error(f"Error loading location goals: {e}", exc_info=True)
            return LocationGoals.defaults()

        if value is None:
            goals = LocationGoals.defaults()
            await self._initialize(LOCATION_GOALS_KEY, goals)
            return goals
        return LocationGoals.model_validate(value) if value.get("goals") else LocationGoals.defaults()

    async def save_goals(self, actor: User, goals: LocationGoals) -> LocationGoals:
        require_admin(actor)
        await self._write(LOCATION_GOALS_KEY, goals, "Failed to save location goals")
        return goals

    async def load_settings(self) -> LocationSettings:
        try:
            value = await self.store.get_setting(LOCATION_SETTINGS_KEY)
        except Exception as e:
            logger.error(f"Error loading location settings: {e}", exc_info=True)
            return LocationSettings.defaults()

        if value is None:
            settings = LocationSettings.defaults()
            await self._initialize(LOCATION_SETTINGS_KEY, settings)
            return settings
        return LocationSettings.model_validate(value) if value.get("settings") else LocationSettings.defaults()

    async def save_settings(self, actor: User, settings: LocationSettings) -> LocationSettings:
        require_admin(actor)
        await self._write(LOCATION_SETTINGS_KEY, settings, "Failed to save location settings")
        return settings

    async def get_location_display_name(self, location_id: str) -> str:
        settings = await self.load_settings()
        return settings.display_name(location_id)

    async def _write(self, key: str, value, failure_message: str) -> None:
        try:
            await self.store.set_setting(key, value.model_dump(mode="json"))
        except Exception as e:
            logger.error(f"Error saving {key}: {e}", exc_info=True)
            raise GatewayError(failure_message) from None

    async def _initialize(self, key: str, value) -> None:
        try:
            await self.store.set_setting(key, value.model_dump(mode="json"))
        except Exception as e:
            logger.warning(f"Could not initialize {key} with defaults: {e}")
