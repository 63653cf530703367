from dataclasses import dataclass, field

from .core.fields import ssm_field


@dataclass
class Name:
    """A person's name."""

    first_name: str = ssm_field("Name/FirstName", default="")
    last_name: str = ssm_field("Name/LastName", default="")


@dataclass
class Contact:
    """A person's contact info."""

    email: str = ssm_field("Contact/Email", default="")
    number: str = ssm_field("Contact/Number", default="")


@dataclass
class Person:
    name: Name = field(default_factory=Name)
    contact: Contact = field(default_factory=Contact)
    favorite_number: int = ssm_field("FavoriteNumber", default=0)
    favorite_inconvenient_number: float = ssm_field("FavoriteInconvenientNumber", default=0.0)
