from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import PlayerRole


class Player(BaseModel):
    """A player listed in a team or pair roster."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    full_name: str = Field(..., alias="fullName")
    surname: str  # Upper-cased, derived from full_name
    wbf_id: str = Field("", alias="wbfId")
    # Only teams carry roles; None keeps the key out of pairs payloads
    role: Optional[PlayerRole] = None
