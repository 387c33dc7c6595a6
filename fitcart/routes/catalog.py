from fastapi import APIRouter, Depends, HTTPException

from fitcart.catalog import Catalog, catalog
from fitcart.models.exercise import BodyPart, BodyPartOut, Exercise
from fitcart.utils.log import logger

router = APIRouter(prefix="/catalog", tags=["catalog"])


def get_catalog() -> Catalog:
    return catalog


@router.get("/", response_model=list[BodyPartOut])
def list_body_parts(cat: Catalog = Depends(get_catalog)):
    return [BodyPartOut.from_part(part) for part in cat.parts()]


@router.get("/{part}", response_model=list[Exercise])
def list_exercises(part: str, cat: Catalog = Depends(get_catalog)):
    """Exercises for a body part, by member name or label."""
    body_part = BodyPart.from_key(part)
    if body_part is None:
        logger.warning(f"Unknown body part requested: {part}")
        raise HTTPException(status_code=404, detail="Body part not found")

    return list(cat.exercises_for(body_part))
