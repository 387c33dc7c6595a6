import uuid
from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

NameStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]


class BodyPart(str, Enum):
    """
    Body-part category. The value is the display label, which is also the
    image asset key for the category tile.
    """

    CHEST = "胸"
    BACK = "背"
    LEGS = "腿"
    SHOULDERS = "肩"
    ARMS = "手"

    @property
    def key(self) -> str:
        return self.name.lower()

    @property
    def label(self) -> str:
        return self.value

    @property
    def asset_name(self) -> str:
        return self.value

    @classmethod
    def from_key(cls, key: str) -> Optional["BodyPart"]:
        """Resolve a member name ("chest") or a label ("胸")."""
        key = key.strip()
        for part in cls:
            if key == part.value or key.lower() == part.key:
                return part
        return None


class Exercise(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    name: NameStr
    body_part: BodyPart
    image_name: Optional[str] = None

    @property
    def is_illustrated(self) -> bool:
        return self.image_name is not None


class BodyPartOut(BaseModel):
    key: str
    label: str

    @classmethod
    def from_part(cls, part: BodyPart) -> "BodyPartOut":
        return cls(key=part.key, label=part.label)
