import asyncio
import logging
from typing import Any, Dict, Optional, Set, Union

from pydantic import BaseModel

from glowboard.services.gateways.audit_logs import AuditLogGateway

logger = logging.getLogger(__name__)

AuditValues = Union[BaseModel, Dict[str, Any], None]


def to_audit_values(values: AuditValues) -> Optional[Dict[str, Any]]:
    if values is None:
        return None
    if isinstance(values, BaseModel):
        return values.model_dump(mode="json", exclude_none=True)
    return dict(values)


class AuditLogger:
    """Best-effort audit channel.

    Each event is written by its own asyncio task so the mutation that
    triggered it never waits on, or fails because of, the audit write.
    Failures are logged and dropped.
    """

    def __init__(self, gateway: AuditLogGateway, user_email: Optional[str] = None):
        self.gateway = gateway
        self.user_email = user_email
        self._pending: Set[asyncio.Task] = set()

    def log(
        self,
        action: str,
        entity_type: str,
        entity_id: str,
        old_values: AuditValues = None,
        new_values: AuditValues = None
    ) -> asyncio.Task:
        task = asyncio.create_task(self._write(
            action,
            entity_type,
            entity_id,
            to_audit_values(old_values),
            to_audit_values(new_values),
        ))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _write(
        self,
        action: str,
        entity_type: str,
        entity_id: str,
        old_values: Optional[Dict[str, Any]],
        new_values: Optional[Dict[str, Any]]
    ) -> None:
        if not self.user_email:
            logger.warning(f"Skipped audit event {action} on {entity_type}: no signed-in user")
            return
        try:
            await self.gateway.log_action(
                action,
                entity_type,
                entity_id,
                self.user_email,
                old_values=old_values,
                new_values=new_values,
            )
        except Exception as e:
            logger.warning(f"Failed to log audit event {action} on {entity_type} {entity_id}: {e}")

    async def drain(self) -> None:
        """Wait for every scheduled audit write to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending))

    def log_sales_record(self, action: str, record_id: str, old_data: AuditValues, new_data: AuditValues):
        return self.log(action, "SalesRecord", record_id, old_data, new_data)

    def log_note(self, action: str, note_id: str, old_data: AuditValues, new_data: AuditValues):
        return self.log(action, "Note", note_id, old_data, new_data)

    def log_user(self, action: str, user_id: str, old_data: AuditValues, new_data: AuditValues):
        return self.log(action, "User", user_id, old_data, new_data)

    def log_login(self):
        return self.log("login", "User", "system")

    def log_logout(self):
        return self.log("logout", "User", "system")
