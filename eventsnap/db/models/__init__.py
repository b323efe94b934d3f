"""Database models package."""
from eventsnap.db.models.user import User, RoleEnum
from eventsnap.db.models.theme import EventTheme
from eventsnap.db.models.event import Event
from eventsnap.db.models.program import EventProgram
from eventsnap.db.models.contact import ContactPerson
from eventsnap.db.models.upload import GuestUpload

__all__ = ["User", "RoleEnum", "EventTheme", "Event", "EventProgram", "ContactPerson", "GuestUpload"]
