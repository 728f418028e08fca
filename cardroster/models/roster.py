from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from .player import Player


class RosterEntity(BaseModel):
    """A team or pair scraped from a registration table."""

    model_config = ConfigDict(populate_by_name=True)

    id: str  # Canonical ID column value, or derived from (event, name)
    event: str
    name: str
    players: List[Player] = []
    uploaded_cards: List[str] = Field(default_factory=list, alias="uploadedCards")

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict using the front end's camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
