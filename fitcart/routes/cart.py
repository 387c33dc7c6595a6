import uuid

from fastapi import APIRouter, Depends, HTTPException, Response

from fitcart.catalog import Catalog
from fitcart.models.cart import CartAdd, CartItem, CartItemUpdate, CartRemove
from fitcart.repositories.cart import CartStore
from fitcart.routes.catalog import get_catalog
from fitcart.utils.log import logger

router = APIRouter(prefix="/cart", tags=["cart"])

_store = CartStore()


def get_cart_store() -> CartStore:
    return _store


def _require_item(store: CartStore, item_id: uuid.UUID) -> CartItem:
    item = store.get(item_id)
    if item is None:
        logger.warning(f"Cart item not found: {item_id}")
        raise HTTPException(status_code=404, detail="Cart item not found")
    return item


# ----------------------- Get -----------------------------


@router.get("/", response_model=list[CartItem])
def get_cart(store: CartStore = Depends(get_cart_store)):
    return list(store.items)


# ----------------------- Add -----------------------------


@router.post("/items", response_model=CartItem, status_code=201)
def add_item(
    data: CartAdd,
    store: CartStore = Depends(get_cart_store),
    cat: Catalog = Depends(get_catalog),
):
    exercise = cat.find(data.exercise_id)
    if exercise is None:
        logger.warning(f"Exercise not in catalog: {data.exercise_id}")
        raise HTTPException(status_code=404, detail="Exercise not found")

    logger.info(f"Adding {exercise.name} to cart")
    return store.add(exercise)


# ----------------------- Update -----------------------------


@router.post("/items/{item_id}/toggle", response_model=CartItem)
def toggle_item(item_id: uuid.UUID, store: CartStore = Depends(get_cart_store)):
    _require_item(store, item_id)
    store.toggle_completed(item_id)
    return store.get(item_id)


@router.patch("/items/{item_id}", response_model=CartItem)
def update_item(
    item_id: uuid.UUID,
    data: CartItemUpdate,
    store: CartStore = Depends(get_cart_store),
):
    _require_item(store, item_id)
    store.update(item_id, sets=data.sets, reps=data.reps)
    return store.get(item_id)


# ----------------------- Delete -----------------------------


@router.delete("/items/{item_id}", status_code=204)
def delete_item(item_id: uuid.UUID, store: CartStore = Depends(get_cart_store)):
    store.remove(item_id)
    return Response(status_code=204)


@router.post("/remove", response_model=list[CartItem])
def remove_positions(data: CartRemove, store: CartStore = Depends(get_cart_store)):
    store.remove_at(data.positions)
    return list(store.items)


@router.delete("/", status_code=204)
def clear_cart(store: CartStore = Depends(get_cart_store)):
    logger.info(f"Clearing cart with {len(store)} items")
    store.clear()
    return Response(status_code=204)
