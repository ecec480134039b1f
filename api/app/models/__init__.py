from app.models.document import Document
from app.models.network import Network, InvalidNetworkError

__all__ = [
    'Document',
    'Network',
    'InvalidNetworkError',
]
