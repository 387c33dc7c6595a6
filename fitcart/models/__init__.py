from .cart import CartItem
from .exercise import BodyPart, Exercise
from .profile import Gender, Profile, ProfileSettings

__all__ = [
    "BodyPart",
    "Exercise",
    "CartItem",
    "Gender",
    "Profile",
    "ProfileSettings",
]
