from .movement import Movement
from .user import User
from .personal_record import PersonalRecord

__all__ = [
    "Movement",
    "User",
    "PersonalRecord",
]
