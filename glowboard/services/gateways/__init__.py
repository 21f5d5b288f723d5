from glowboard.services.gateways.audit_logs import AuditLogGateway
from glowboard.services.gateways.base import BaseGateway
from glowboard.services.gateways.notes import NoteGateway
from glowboard.services.gateways.sales_records import SalesRecordGateway
from glowboard.services.gateways.users import UserGateway

__all__ = [
    "AuditLogGateway",
    "BaseGateway",
    "NoteGateway",
    "SalesRecordGateway",
    "UserGateway",
]
