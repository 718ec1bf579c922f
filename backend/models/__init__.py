# Request/response models for the six degrees API.
from .sixdegrees import ConnectedPerson, Content, ErrorMessage, Thing

__all__ = [
    "ConnectedPerson",
    "Content",
    "ErrorMessage",
    "Thing",
]
