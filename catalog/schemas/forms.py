"""
Form models: validation and sanitization of submitted entity fields.

Each form turns a raw submission (a mapping of field name to whatever the
presentation layer received) into normalized values, or fails with the
complete list of per-field errors. Validation is a pure function of its
input; referential checks (does author 7 exist?) belong to the commands.

Example:
    ```python
    from catalog.schemas.forms import AuthorForm, validate_form

    form = validate_form(AuthorForm, {"first_name": " Jane ", "family_name": "Austen"})
    form.first_name  # "Jane"
    ```
"""

from datetime import date
from typing import Any, ClassVar, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from catalog.constants import GENRE_NAME_MIN_LENGTH
from catalog.exceptions import FieldError, ValidationError
from catalog.utils.dates import parse_iso_date
from catalog.utils.text import (
    escape,
    is_alphanumeric,
    normalize_selection,
    to_text,
)

FormT = TypeVar("FormT", bound="FormModel")


def _require_length(value: str, minimum: int, message: str) -> str:
    if len(value) < minimum:
        raise PydanticCustomError("too_short", message)
    return value


def _optional_date(value: Any, message: str) -> date | None:
    try:
        return parse_iso_date(value)
    except (TypeError, ValueError):
        raise PydanticCustomError("invalid_date", message)


class FormModel(BaseModel):  # type: ignore[misc]
    """
    Base form.

    Subclasses list their fields by kind; `sanitize` uses those lists to
    trim text, strip dates and normalize multi-select values before the
    per-field rules run. Text rules are checked on the trimmed value and
    the accepted value is stored HTML-escaped.

    Attributes:
        TEXT_FIELDS: Single-valued text fields.
        DATE_FIELDS: Optional ISO-8601 date fields.
        SELECTION_FIELDS: Multi-select fields (list of ids).
    """

    model_config = ConfigDict(extra="ignore", validate_default=True)

    TEXT_FIELDS: ClassVar[tuple[str, ...]] = ()
    DATE_FIELDS: ClassVar[tuple[str, ...]] = ()
    SELECTION_FIELDS: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def sanitize(cls, raw: Mapping[str, Any]) -> dict[str, Any]:
        """
        Trim/normalize raw values without applying any rule.

        Args:
            raw: Submitted fields; unknown keys are dropped.

        Returns:
            Values ready for rule checking.
        """
        values: dict[str, Any] = {}
        for name in cls.TEXT_FIELDS:
            values[name] = to_text(raw.get(name)).strip()
        for name in cls.DATE_FIELDS:
            value = raw.get(name)
            # Falsy values mean "not provided"
            values[name] = value.strip() if isinstance(value, str) else value
            if not values[name]:
                values[name] = None
        for name in cls.SELECTION_FIELDS:
            values[name] = normalize_selection(raw.get(name))
        return values

    @classmethod
    def redisplay_values(cls, raw: Mapping[str, Any]) -> dict[str, Any]:
        """Sanitized values as they should be shown on a rejected form."""
        values = cls.sanitize(raw)
        for name in cls.TEXT_FIELDS:
            values[name] = escape(values[name])
        return values


class AuthorForm(FormModel):
    """Author create/update fields."""

    TEXT_FIELDS: ClassVar[tuple[str, ...]] = ("first_name", "family_name")
    DATE_FIELDS: ClassVar[tuple[str, ...]] = ("date_of_birth", "date_of_death")

    first_name: str = ""
    family_name: str = ""
    date_of_birth: date | None = None
    date_of_death: date | None = None

    @field_validator("first_name")
    @classmethod
    def validate_first_name(cls, v: str) -> str:
        return _person_name(v, "First name")

    @field_validator("family_name")
    @classmethod
    def validate_family_name(cls, v: str) -> str:
        return _person_name(v, "Family name")

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def validate_date_of_birth(cls, v: Any) -> date | None:
        return _optional_date(v, "Invalid date of birth")

    @field_validator("date_of_death", mode="before")
    @classmethod
    def validate_date_of_death(cls, v: Any) -> date | None:
        return _optional_date(v, "Invalid date of death")


def _person_name(value: str, label: str) -> str:
    _require_length(value, 1, f"{label} must be specified.")
    if not is_alphanumeric(value):
        raise PydanticCustomError(
            "not_alphanumeric", f"{label} has non-alphanumeric characters."
        )
    return escape(value)


class BookForm(FormModel):
    """
    Book create/update fields.

    `author` is the submitted author id as text and `genre` the list of
    selected genre ids; both are resolved against the store by the book
    commands.
    """

    TEXT_FIELDS: ClassVar[tuple[str, ...]] = ("title", "author", "summary", "isbn")
    SELECTION_FIELDS: ClassVar[tuple[str, ...]] = ("genre",)

    title: str = ""
    author: str = ""
    summary: str = ""
    isbn: str = ""
    genre: list[str] = []

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return escape(_require_length(v, 1, "Title must not be empty."))

    @field_validator("author")
    @classmethod
    def validate_author(cls, v: str) -> str:
        return escape(_require_length(v, 1, "Author must not be empty."))

    @field_validator("summary")
    @classmethod
    def validate_summary(cls, v: str) -> str:
        return escape(_require_length(v, 1, "Summary must not be empty."))

    @field_validator("isbn")
    @classmethod
    def validate_isbn(cls, v: str) -> str:
        return escape(_require_length(v, 1, "ISBN must not be empty"))


class BookInstanceForm(FormModel):
    """
    Book copy create/update fields.

    `status` is passed through sanitized; an empty status means the
    default. Membership in the status enum is checked by the store.
    """

    TEXT_FIELDS: ClassVar[tuple[str, ...]] = ("book", "imprint", "status")
    DATE_FIELDS: ClassVar[tuple[str, ...]] = ("due_back",)

    book: str = ""
    imprint: str = ""
    status: str | None = None
    due_back: date | None = None

    @field_validator("book")
    @classmethod
    def validate_book(cls, v: str) -> str:
        return escape(_require_length(v, 1, "Book must be specified"))

    @field_validator("imprint")
    @classmethod
    def validate_imprint(cls, v: str) -> str:
        return escape(_require_length(v, 1, "Imprint must be specified"))

    @field_validator("status")
    @classmethod
    def sanitize_status(cls, v: str | None) -> str | None:
        return escape(v) if v else None

    @field_validator("due_back", mode="before")
    @classmethod
    def validate_due_back(cls, v: Any) -> date | None:
        return _optional_date(v, "Invalid date")


class GenreForm(FormModel):
    """Genre create/update fields."""

    TEXT_FIELDS: ClassVar[tuple[str, ...]] = ("name",)

    name: str = ""

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return escape(
            _require_length(
                v,
                GENRE_NAME_MIN_LENGTH,
                f"Genre name must contain at least {GENRE_NAME_MIN_LENGTH} characters",
            )
        )


def validate_form(form_cls: type[FormT], raw: Mapping[str, Any]) -> FormT:
    """
    Validate a raw submission against a form.

    Every field is checked; the first failing rule of each field is
    reported, so a submission with two bad fields yields two errors.

    Args:
        form_cls: The form model to validate against.
        raw: Submitted field values.

    Returns:
        The validated form with normalized values.

    Raises:
        ValidationError: With all field errors and the sanitized values.
    """
    try:
        return form_cls.model_validate(form_cls.sanitize(raw))
    except PydanticValidationError as exc:
        errors = [
            FieldError(
                field=str(error["loc"][0]) if error["loc"] else "__all__",
                message=error["msg"],
            )
            for error in exc.errors()
        ]
        raise ValidationError(errors, form_cls.redisplay_values(raw)) from exc
