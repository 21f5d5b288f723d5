from .sales_record import SalesRecord, SalesRecordCreate, SalesRecordUpdate, TopSeller, ServiceLine
from .note import Note, NoteCreate, NoteUpdate
from .user import User, UserCreate, UserUpdate
from .audit_log import AuditLog, AuditLogCreate
from .settings import LocationGoal, LocationGoals, LocationSetting, LocationSettings

__all__ = [
    'SalesRecord',
    'SalesRecordCreate',
    'SalesRecordUpdate',
    'TopSeller',
    'ServiceLine',
    'Note',
    'NoteCreate',
    'NoteUpdate',
    'User',
    'UserCreate',
    'UserUpdate',
    'AuditLog',
    'AuditLogCreate',
    'LocationGoal',
    'LocationGoals',
    'LocationSetting',
    'LocationSettings',
]
