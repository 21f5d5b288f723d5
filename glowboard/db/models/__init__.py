from .document import Document
from .settings_document import SettingsDocument

__all__ = [
    'Document',
    'SettingsDocument',
]
