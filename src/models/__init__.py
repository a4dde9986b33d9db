from .base import Base, BaseModel, TimeStamp
from .host import Host

__all__ = [
    "Base",
    "BaseModel",
    "TimeStamp",
    "Host",
]
