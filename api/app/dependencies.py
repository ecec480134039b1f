from fastapi import Request

from app.services.wizard_directory_service import WizardDirectoryService
from app.store.base import DocumentStore


def get_store(request: Request) -> DocumentStore:
    """The document store opened in the app lifespan."""
    return request.app.state.store


def get_directory(request: Request) -> WizardDirectoryService:
    return WizardDirectoryService(get_store(request))
