import uuid

from pydantic import BaseModel, ConfigDict, Field

from fitcart.models.exercise import Exercise

DEFAULT_SETS = 3
DEFAULT_REPS = 10

# Stepper bounds on the input side; the store itself only floors at zero.
MAX_SETS = 20
MAX_REPS = 100


class CartItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    exercise: Exercise
    sets: int = DEFAULT_SETS
    reps: int = DEFAULT_REPS
    completed: bool = False


class CartAdd(BaseModel):
    exercise_id: uuid.UUID


class CartItemUpdate(BaseModel):
    sets: int | None = Field(default=None, ge=0, le=MAX_SETS)
    reps: int | None = Field(default=None, ge=0, le=MAX_REPS)


class CartRemove(BaseModel):
    positions: list[int] = Field(default_factory=list)
