from typing import Any, Dict, List, Optional

from glowboard.core.constants import AUDIT_LOGS_COLLECTION
from glowboard.schemas.audit_log import AuditLog, AuditLogCreate
from glowboard.services.gateways.base import BaseGateway


class AuditLogGateway(BaseGateway[AuditLog]):
    collection_name = AUDIT_LOGS_COLLECTION
    schema_class = AuditLog

    async def log_action(
        self,
        action: str,
        entity_type: str,
        entity_id: str,
        user_email: str,
        old_values: Optional[Dict[str, Any]] = None,
        new_values: Optional[Dict[str, Any]] = None
    ) -> AuditLog:
        """Append one audit entry describing a mutation."""
        entry = AuditLogCreate(
            user_email=user_email,
            action_type=action,
            entity_type=entity_type,
            entity_id=entity_id,
            old_values=old_values or None,
            new_values=new_values or None,
            details=f"{action} performed on {entity_type}",
        )
        document = await self._run(
            "create",
            self.store.create(self.collection_name, self.to_document(entry)),
            "Failed to create audit log",
        )
        return self.to_schema(document)

    async def recent(self, limit: int = 100) -> List[AuditLog]:
        """Newest entries first."""
        documents = await self._run(
            "fetch",
            self.store.query(self.collection_name, order_by="created_at", descending=True),
        )
        return [self.to_schema(document) for document in documents[:limit]]
