import uuid

from fitcart.models.exercise import BodyPart, Exercise

# Chest exercises ship with an illustration named after the exercise.
_ILLUSTRATED = {BodyPart.CHEST}

_EXERCISE_NAMES: dict[BodyPart, tuple[str, ...]] = {
    BodyPart.CHEST: (
        "平板臥推",
        "上斜臥推",
        "下斜臥推",
        "蝴蝶機夾胸",
        "雙槓臂屈伸",
        "伏地挺身",
    ),
    BodyPart.BACK: ("硬舉", "引體向上", "俯身划船"),
    BodyPart.LEGS: ("深蹲", "弓箭步", "腿舉"),
    BodyPart.SHOULDERS: ("肩推", "側平舉", "臉拉"),
    BodyPart.ARMS: ("二頭彎舉", "三頭下壓", "槌式彎舉"),
}


def _build(part: BodyPart) -> tuple[Exercise, ...]:
    return tuple(
        Exercise(
            name=name,
            body_part=part,
            image_name=name if part in _ILLUSTRATED else None,
        )
        for name in _EXERCISE_NAMES[part]
    )


class Catalog:
    """
    Read-only mapping from body part to its sample exercises.

    Built once; every lookup returns the same exercises, ids included.
    """

    def __init__(self) -> None:
        self._by_part: dict[BodyPart, tuple[Exercise, ...]] = {
            part: _build(part) for part in BodyPart
        }
        self._by_id: dict[uuid.UUID, Exercise] = {
            ex.id: ex for exercises in self._by_part.values() for ex in exercises
        }

    def parts(self) -> tuple[BodyPart, ...]:
        return tuple(BodyPart)

    def exercises_for(self, part: BodyPart) -> tuple[Exercise, ...]:
        return self._by_part[part]

    def label(self, part: BodyPart) -> str:
        return part.label

    def find(self, exercise_id: uuid.UUID) -> Exercise | None:
        return self._by_id.get(exercise_id)


catalog = Catalog()
