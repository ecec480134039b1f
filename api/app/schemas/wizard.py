from enum import IntEnum
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class Affinity(IntEnum):
    """Elemental affinity of a wizard."""
    NOT_SET = 0
    NEUTRAL = 1
    FIRE = 2
    WIND = 3
    WATER = 4


class WizardUpsert(BaseModel):
    """A full or partial wizard record. Only `id` is required."""
    id: str = Field(..., min_length=1, max_length=100)
    owner: str | None = None
    power: int | None = Field(None, ge=0)
    max_power: int | None = Field(None, ge=0)
    affinity: Affinity | None = None
    ascending: bool | None = None
    ascension_opponent: int | None = None
    molded: bool | None = None
    nonce: int | None = None
    online: bool | None = None
    ready: bool | None = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = 'allow'

    def to_record(self) -> dict:
        """Only the fields the caller actually sent, under their wire names."""
        return self.model_dump(mode='json', by_alias=True, exclude_unset=True)


class UpsertResult(BaseModel):
    upserted: int
