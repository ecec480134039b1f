"""Challenge endpoints, scoped by network."""
from fastapi import APIRouter, Depends, HTTPException, status

from app.dependencies import get_directory
from app.models.network import InvalidNetworkError
from app.schemas.challenge import ChallengeCreate, ChallengeResponse
from app.services.wizard_directory_service import (
    WizardDirectoryService, WizardDirectoryError,
)

router = APIRouter()


@router.post(
    '/challenges',
    response_model=ChallengeResponse,
    status_code=status.HTTP_201_CREATED,
)
async def send_challenge(
    network: str,
    data: ChallengeCreate,
    svc: WizardDirectoryService = Depends(get_directory),
):
    """Issue a challenge from one wizard to another."""
    try:
        return await svc.send_challenge(network, data.model_dump(by_alias=True))
    except InvalidNetworkError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except WizardDirectoryError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get('/wizards/{wizard_id}/challenges', response_model=list[ChallengeResponse])
async def list_wizard_challenges(
    network: str,
    wizard_id: str,
    svc: WizardDirectoryService = Depends(get_directory),
):
    """Challenges the wizard has issued or received."""
    try:
        return await svc.get_challenges_by_wizard(network, wizard_id)
    except InvalidNetworkError as e:
        raise HTTPException(status_code=404, detail=str(e))
