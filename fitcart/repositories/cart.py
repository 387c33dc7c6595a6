import uuid
from typing import Callable, Iterable, Iterator

from fitcart.models.cart import CartItem
from fitcart.models.exercise import Exercise
from fitcart.utils.log import logger

CartSnapshot = tuple[CartItem, ...]
CartListener = Callable[[CartSnapshot], None]


class CartStore:
    """
    Owns the workout cart and is the only thing allowed to change it.

    Listeners are called synchronously with the new snapshot after every
    mutation, before the mutating call returns. Lookups that miss are no-ops.
    Not thread-safe; callers serialise access.
    """

    def __init__(self) -> None:
        self._items: list[CartItem] = []
        self._listeners: list[CartListener] = []

    # ----------------------- Read -----------------------------

    @property
    def items(self) -> CartSnapshot:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[CartItem]:
        return iter(self.items)

    def get(self, item_id: uuid.UUID) -> CartItem | None:
        idx = self._index_of(item_id)
        return None if idx is None else self._items[idx]

    # ----------------------- Observe -----------------------------

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """
        Register a listener. Returns a callable that unregisters it.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.items
        for listener in list(self._listeners):
            listener(snapshot)

    # ----------------------- Add -----------------------------

    def add(self, exercise: Exercise) -> CartItem:
        item = CartItem(exercise=exercise.model_copy())
        self._items.append(item)
        logger.debug(f"Added {exercise.name} to cart as item {item.id}")
        self._notify()
        return item

    # ----------------------- Remove -----------------------------

    def remove(self, item_id: uuid.UUID) -> None:
        idx = self._index_of(item_id)
        if idx is None:
            logger.debug(f"remove: item {item_id} not in cart")
            return
        del self._items[idx]
        logger.debug(f"Removed cart item {item_id}")
        self._notify()

    def remove_at(self, positions: Iterable[int]) -> None:
        """
        Remove the items at the given positions of the current sequence.
        Positions are resolved once, so {0, 2} on [A, B, C] leaves [B].
        Out-of-range positions are ignored.
        """
        wanted = {p for p in positions if 0 <= p < len(self._items)}
        if not wanted:
            return
        self._items = [
            item for idx, item in enumerate(self._items) if idx not in wanted
        ]
        logger.debug(f"Removed {len(wanted)} cart items at {sorted(wanted)}")
        self._notify()

    def clear(self) -> None:
        count = len(self._items)
        self._items = []
        logger.debug(f"Cleared cart ({count} items)")
        self._notify()

    # ----------------------- Update -----------------------------

    def toggle_completed(self, item_id: uuid.UUID) -> None:
        self._replace(item_id, lambda item: {"completed": not item.completed})

    def update_sets(self, item_id: uuid.UUID, sets: int) -> None:
        self.update(item_id, sets=sets)

    def update_reps(self, item_id: uuid.UUID, reps: int) -> None:
        self.update(item_id, reps=reps)

    def update(
        self,
        item_id: uuid.UUID,
        *,
        sets: int | None = None,
        reps: int | None = None,
    ) -> None:
        """
        Set sets and/or reps in one change, floored at zero. Listeners are
        notified once.
        """
        changes: dict = {}
        if sets is not None:
            changes["sets"] = max(0, sets)
        if reps is not None:
            changes["reps"] = max(0, reps)
        if not changes:
            return
        self._replace(item_id, lambda item: changes)

    # ----------------------- Helpers -----------------------------

    def _index_of(self, item_id: uuid.UUID) -> int | None:
        for idx, item in enumerate(self._items):
            if item.id == item_id:
                return idx
        return None

    def _replace(
        self, item_id: uuid.UUID, changes: Callable[[CartItem], dict]
    ) -> None:
        idx = self._index_of(item_id)
        if idx is None:
            logger.debug(f"update: item {item_id} not in cart")
            return
        current = self._items[idx]
        self._items[idx] = current.model_copy(update=changes(current))
        self._notify()
