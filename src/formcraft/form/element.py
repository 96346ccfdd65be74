"""
Field Type System

Every field type offered by the builder palette is a subclass of
`BaseFieldType` registered under its `FieldType` key. A field type knows
its palette entry (label, category), the answer kind a respondent produces
for it and how to coerce raw input into that answer.

Usage:
    @register_field_type(FieldType.PHONE)
    class PhoneFieldType(TextFieldType):
        type_name = "Phone"
"""
import math
import numbers
from typing import Any, ClassVar, Optional, Tuple, Type

from formcraft.helper import ClassRegistry, parse_iso_date

from .answer import (
    AnswerKind,
    BaseAnswer,
    ChoiceAnswer,
    DateAnswer,
    FilesAnswer,
    LongTextAnswer,
    MultiChoiceAnswer,
    NumberAnswer,
    TextAnswer,
)
from .datadef import FieldOption, FieldType, FormField
from .exceptions import InvalidFieldError
from . import config


class FieldCategory:
    BASIC = "basic"
    ADVANCED = "advanced"


class BaseFieldType(object):
    type_key: ClassVar[FieldType]
    type_name: ClassVar[str]
    category: ClassVar[str] = FieldCategory.BASIC
    answer_model: ClassVar[Type[BaseAnswer]] = TextAnswer
    has_options: ClassVar[bool] = False

    @classmethod
    def answer_kind(cls) -> AnswerKind:
        return AnswerKind(cls.answer_model.model_fields["kind"].default)

    @classmethod
    def default_options(cls) -> Optional[Tuple[FieldOption, ...]]:
        if not cls.has_options:
            return None

        return (
            FieldOption(id="opt1", label="Option 1", value="option1"),
            FieldOption(id="opt2", label="Option 2", value="option2"),
        )

    @classmethod
    def build_field(cls, field_id: str, page_number: int = 1, **kwargs) -> FormField:
        ''' New field as created when the palette entry is activated. '''
        return FormField(
            id=field_id,
            type=cls.type_key,
            label=cls.type_name or config.DEFAULT_FIELD_LABEL,
            required=False,
            page_number=page_number,
            options=cls.default_options(),
            **kwargs
        )

    @classmethod
    def make_answer(cls, field: FormField, raw: Any) -> BaseAnswer:
        if isinstance(raw, BaseAnswer):
            if raw.kind != cls.answer_kind():
                raise InvalidFieldError(
                    "F00.110",
                    f"Answer of kind [{raw.kind}] does not fit field [{field.id}] of type [{field.type}]",
                )
            return raw

        try:
            return cls.coerce(field, raw)
        except ValueError as e:
            raise InvalidFieldError("F00.111", f"Invalid answer for field [{field.id}]: {e}", str(e))

    @classmethod
    def coerce(cls, field: FormField, raw: Any) -> BaseAnswer:
        raise NotImplementedError


FieldTypeRegistry = ClassRegistry(BaseFieldType)


def register_field_type(type_key: FieldType):
    def _decorator(cls):
        cls.type_key = FieldType(type_key)
        return FieldTypeRegistry.register(str(cls.type_key))(cls)

    return _decorator


def get_field_type(type_key) -> Type[BaseFieldType]:
    return FieldTypeRegistry.get(str(type_key))


def palette(category: Optional[str] = None) -> Tuple[Type[BaseFieldType], ...]:
    ''' Palette entries in registration order, basic fields first. '''
    entries = FieldTypeRegistry.values()
    if category is not None:
        return tuple(entry for entry in entries if entry.category == category)

    return tuple(sorted(entries, key=lambda entry: entry.category != FieldCategory.BASIC))


def make_answer(field: FormField, raw: Any) -> BaseAnswer:
    return get_field_type(field.type).make_answer(field, raw)


def _as_text(raw) -> str:
    if raw is None:
        return ""

    if isinstance(raw, str):
        return raw

    if isinstance(raw, numbers.Number) and not isinstance(raw, bool):
        return str(raw)

    raise ValueError(f"expected a text value, got [{type(raw).__name__}]")


def _as_names(raw) -> Tuple[str, ...]:
    if raw is None or raw == "":
        return ()

    if isinstance(raw, str):
        return (raw,)

    if isinstance(raw, (list, tuple)) and all(isinstance(item, str) for item in raw):
        return tuple(raw)

    raise ValueError("expected a list of strings")


def _check_choices(field: FormField, values: Tuple[str, ...]) -> None:
    allowed = field.option_values()
    for value in values:
        if value not in allowed:
            raise ValueError(f"[{value}] is not one of the options {list(allowed)}")


class TextFieldType(BaseFieldType):
    answer_model = TextAnswer

    @classmethod
    def coerce(cls, field, raw):
        return cls.answer_model(value=_as_text(raw))


class ChoiceFieldType(BaseFieldType):
    category = FieldCategory.ADVANCED
    answer_model = ChoiceAnswer
    has_options = True

    @classmethod
    def coerce(cls, field, raw):
        value = _as_text(raw)
        if value:
            _check_choices(field, (value,))
        return ChoiceAnswer(value=value)


@register_field_type(FieldType.FIRST_NAME)
class FirstNameFieldType(TextFieldType):
    type_name = "First Name"


@register_field_type(FieldType.LAST_NAME)
class LastNameFieldType(TextFieldType):
    type_name = "Last Name"


@register_field_type(FieldType.EMAIL)
class EmailFieldType(TextFieldType):
    type_name = "Email"


@register_field_type(FieldType.PHONE)
class PhoneFieldType(TextFieldType):
    type_name = "Phone"


@register_field_type(FieldType.TEXT)
class TextInputFieldType(TextFieldType):
    type_name = "Text Input"


@register_field_type(FieldType.TEXTAREA)
class TextAreaFieldType(TextFieldType):
    type_name = "Text Area"
    answer_model = LongTextAnswer


@register_field_type(FieldType.DROPDOWN)
class DropdownFieldType(ChoiceFieldType):
    type_name = "Dropdown"


@register_field_type(FieldType.RADIO)
class RadioFieldType(ChoiceFieldType):
    type_name = "Radio Buttons"


@register_field_type(FieldType.CHECKBOX)
class CheckboxFieldType(ChoiceFieldType):
    type_name = "Checkboxes"
    answer_model = MultiChoiceAnswer

    @classmethod
    def coerce(cls, field, raw):
        values = _as_names(raw)
        _check_choices(field, values)
        return MultiChoiceAnswer(values=values)


@register_field_type(FieldType.DATE)
class DateFieldType(BaseFieldType):
    type_name = "Date Picker"
    category = FieldCategory.ADVANCED
    answer_model = DateAnswer

    @classmethod
    def coerce(cls, field, raw):
        return DateAnswer(value=parse_iso_date(raw or None))


@register_field_type(FieldType.FILE)
class FileFieldType(BaseFieldType):
    type_name = "File Upload"
    category = FieldCategory.ADVANCED
    answer_model = FilesAnswer

    @classmethod
    def coerce(cls, field, raw):
        return FilesAnswer(names=_as_names(raw))


@register_field_type(FieldType.NUMBER)
class NumberFieldType(BaseFieldType):
    type_name = "Number"
    category = FieldCategory.ADVANCED
    answer_model = NumberAnswer

    @classmethod
    def coerce(cls, field, raw):
        if raw is None or raw == "":
            return NumberAnswer()

        if isinstance(raw, bool):
            raise ValueError("expected a number, got a boolean")

        if isinstance(raw, numbers.Number):
            value = raw
        else:
            text = _as_text(raw).strip()
            try:
                value = int(text)
            except ValueError:
                value = float(text)

        if not math.isfinite(value):
            raise ValueError(f"expected a finite number, got [{value}]")

        return NumberAnswer(value=value)


@register_field_type(FieldType.PASSWORD)
class PasswordFieldType(TextFieldType):
    type_name = "Password"
    category = FieldCategory.ADVANCED
