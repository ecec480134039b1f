from app.schemas.wizard import Affinity, WizardUpsert, UpsertResult
from app.schemas.challenge import ChallengeCreate, ChallengeResponse

__all__ = [
    'Affinity',
    'WizardUpsert',
    'UpsertResult',
    'ChallengeCreate',
    'ChallengeResponse',
]
