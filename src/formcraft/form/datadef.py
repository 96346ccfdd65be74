from datetime import date, datetime
from enum import StrEnum
from typing import Dict, Optional, Tuple, Union

from pydantic import Field, model_validator

from formcraft.data import DataModel
from formcraft.helper import unique

from .answer import Answer


class FieldType(StrEnum):
    TEXT = "text"
    TEXTAREA = "textarea"
    EMAIL = "email"
    PHONE = "phone"
    NUMBER = "number"
    PASSWORD = "password"
    DROPDOWN = "dropdown"
    RADIO = "radio"
    CHECKBOX = "checkbox"
    DATE = "date"
    FILE = "file"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"


class FieldWidth(StrEnum):
    FULL = "full"
    HALF = "half"
    THIRD = "third"
    QUARTER = "quarter"


class FieldPosition(StrEnum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class FormStatus(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class FieldOption(DataModel):
    id: str = Field(min_length=1)
    label: str
    value: str


class ValidationRules(DataModel):
    min_length: Optional[int] = Field(default=None, ge=0)
    max_length: Optional[int] = Field(default=None, ge=0)
    pattern: Optional[str] = None
    min: Optional[Union[int, float]] = None
    max: Optional[Union[int, float]] = None


class FormField(DataModel):
    """One input definition of a form."""
    id: str = Field(min_length=1)
    type: FieldType
    label: str
    placeholder: Optional[str] = None
    required: bool = False
    options: Optional[Tuple[FieldOption, ...]] = None
    validation_rules: Optional[ValidationRules] = None
    page_number: int = Field(default=1, ge=1)
    width: FieldWidth = FieldWidth.FULL
    position: FieldPosition = FieldPosition.LEFT

    @model_validator(mode="after")
    def check_option_ids(self):
        if self.options and not unique(opt.id for opt in self.options):
            raise ValueError(f"Option identifiers must be unique within field [{self.id}]")
        return self

    def option_values(self) -> Tuple[str, ...]:
        return tuple(opt.value for opt in self.options or ())


class FormSettings(DataModel):
    email_notifications: bool = False
    redirect_url: Optional[str] = None
    thank_you_message: str
    expiration_date: Optional[date] = None


class Form(DataModel):
    """A titled, paginated collection of fields with a publish status."""
    id: str = Field(min_length=1)
    title: str
    description: Optional[str] = None
    status: FormStatus = FormStatus.INACTIVE
    fields: Tuple[FormField, ...] = ()
    settings: FormSettings
    created_by: str
    created_at: datetime
    updated_at: datetime

    @model_validator(mode="after")
    def check_field_ids(self):
        if not unique(field.id for field in self.fields):
            raise ValueError(f"Field identifiers must be unique within form [{self.id}]")
        return self

    @property
    def is_active(self) -> bool:
        return self.status == FormStatus.ACTIVE

    @property
    def total_pages(self) -> int:
        return max((field.page_number for field in self.fields), default=1)

    def fields_on_page(self, page: int) -> Tuple[FormField, ...]:
        return tuple(field for field in self.fields if field.page_number == page)

    def get_field(self, field_id: str) -> Optional[FormField]:
        return next((field for field in self.fields if field.id == field_id), None)


class FormResponse(DataModel):
    """One respondent submission. Never edited after creation."""
    id: str = Field(min_length=1)
    form_id: str
    answers: Dict[str, Answer] = Field(default_factory=dict)
    files: Optional[Tuple[str, ...]] = None
    submitted_at: datetime

    def get_answer(self, field_id):
        return self.answers.get(field_id)


class DashboardStats(DataModel):
    total_forms: int = 0
    active_forms: int = 0
    inactive_forms: int = 0
    total_responses: int = 0
