"""Form payloads for the public and admin POST endpoints."""

from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from pacs_site.core.errors import ValidationError

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_PATTERN = r"^\d{2}:\d{2}$"
# Upper bound of the Integer columns these fields are stored in.
MAX_INT_COLUMN = 2_147_483_647


class SiteForm(BaseModel):
    """Base for urlencoded forms: strips strings, blank optional fields become None."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    # Localized 400 message shown when the form does not validate.
    error_message: ClassVar[str] = "Formulaire invalide."

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v


class RegistrationForm(SiteForm):
    """Sign-up for an event."""

    error_message: ClassVar[str] = "Tous les champs requis manquent."

    event_id: int = Field(..., ge=1, le=MAX_INT_COLUMN)
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    phone: str | None = Field(default=None, max_length=64)


class ContactForm(SiteForm):
    error_message: ClassVar[str] = "Veuillez remplir les champs obligatoires."

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=1, max_length=255)
    phone: str | None = Field(default=None, max_length=64)
    subject: str | None = Field(default=None, max_length=255)
    message: str = Field(..., min_length=1)


class EventForm(SiteForm):
    """Admin form for a new event."""

    error_message: ClassVar[str] = "Champs obligatoires manquants."

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    date: str = Field(..., pattern=DATE_PATTERN)
    start_time: str = Field(..., pattern=TIME_PATTERN)
    end_time: str | None = Field(default=None, pattern=TIME_PATTERN)
    location: str = Field(..., min_length=1, max_length=255)
    cost: str | None = Field(default=None, max_length=255)
    capacity: int | None = Field(default=None, ge=0, le=MAX_INT_COLUMN)


class VolunteerForm(SiteForm):
    error_message: ClassVar[str] = "Nom et poste obligatoires."

    name: str = Field(..., min_length=1, max_length=255)
    position: str = Field(..., min_length=1, max_length=255)
    bio: str | None = None
    photo: str | None = Field(default=None, max_length=2048)


FormT = TypeVar("FormT", bound=SiteForm)


def parse_form(form_cls: type[FormT], data: dict[str, Any]) -> FormT:
    """Validate submitted fields; raise the form's localized ValidationError on failure."""
    try:
        return form_cls.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(form_cls.error_message) from e
