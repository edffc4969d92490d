from typing import Any, List
from pydantic import BaseModel, Field, StrictBool, StrictStr, field_validator


class BoardDocumentItem(BaseModel):
    class Config:
        extra = "allow"
        populate_by_name = True

    def to_document(self) -> dict[str, Any]:
        """Plain dict as stored: only keys the client sent, extras untouched."""
        return {
            **self.model_dump(by_alias=True, exclude_unset=True),
            **(self.model_extra or {}),
        }


class Card(BoardDocumentItem):
    id: StrictStr
    column_id: StrictStr = Field(alias="columnId")
    title: StrictStr


class Step(BoardDocumentItem):
    id: StrictStr
    title: StrictStr
    completed: StrictBool = False


class BoardPayload(BaseModel):
    cards: List[Card] = []
    steps: List[Step] = []

    @field_validator("cards", "steps")
    @classmethod
    def ids_unique(cls, items):
        seen = set()
        for item in items:
            if item.id in seen:
                raise ValueError(f"duplicate id '{item.id}'")
            seen.add(item.id)
        return items


class BoardRead(BaseModel):
    cards: List[Any]
    steps: List[Any]
