"""Wizard endpoints, scoped by network.

Reads return stored documents as they are; only writes are validated.
"""
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query

from app.dependencies import get_directory
from app.models.network import InvalidNetworkError
from app.schemas.wizard import WizardUpsert, UpsertResult
from app.services.wizard_directory_service import (
    WizardDirectoryService, WizardDirectoryError,
)

router = APIRouter()


@router.put('', response_model=UpsertResult)
async def upsert_wizards(
    network: str,
    wizards: list[WizardUpsert],
    svc: WizardDirectoryService = Depends(get_directory),
):
    """Create wizards or merge the given fields into existing ones."""
    try:
        await svc.upsert_wizards(network, [w.to_record() for w in wizards])
    except InvalidNetworkError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except WizardDirectoryError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return UpsertResult(upserted=len(wizards))


@router.get('', response_model=list[dict[str, Any]])
async def list_wizards(
    network: str,
    owner: str | None = Query(None, description='Exact owner address'),
    online: bool | None = Query(None),
    svc: WizardDirectoryService = Depends(get_directory),
):
    """List wizards, optionally only one owner's or only online ones."""
    try:
        if owner is not None:
            wizards = await svc.get_wizards_by_owner(network, owner)
        elif online:
            wizards = await svc.get_online_wizards(network)
        else:
            wizards = await svc.get_all_wizards(network)
    except InvalidNetworkError as e:
        raise HTTPException(status_code=404, detail=str(e))

    if online is not None:
        wizards = [w for w in wizards if bool(w.get('online')) is online]
    return wizards


@router.get('/{wizard_id}', response_model=dict[str, Any])
async def get_wizard(
    network: str,
    wizard_id: str,
    svc: WizardDirectoryService = Depends(get_directory),
):
    """Get a single wizard by id."""
    try:
        wizard = await svc.get_wizard(network, wizard_id)
    except InvalidNetworkError as e:
        raise HTTPException(status_code=404, detail=str(e))
    if wizard is None:
        raise HTTPException(status_code=404, detail='Wizard not found')
    return wizard
