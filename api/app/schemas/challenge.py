from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class ChallengeCreate(BaseModel):
    """Schema for sending a challenge."""
    challenge_id: str = Field(..., min_length=1, max_length=100)
    challenging_wizard_id: str = Field(..., min_length=1)
    other_wizard_id: str = Field(..., min_length=1)

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ChallengeResponse(ChallengeCreate):
    """Stored challenge document."""
    challenge_accepted: bool = False
