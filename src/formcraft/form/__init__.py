from ._meta import config, logger
from .answer import Answer, AnswerKind, render_answer
from .datadef import (
    DashboardStats,
    FieldOption,
    FieldPosition,
    FieldType,
    FieldWidth,
    Form,
    FormField,
    FormResponse,
    FormSettings,
    FormStatus,
    ValidationRules,
)
from .element import BaseFieldType, FieldTypeRegistry, get_field_type, make_answer, palette, register_field_type
from .store import FormStore
from .builder import BuilderSession
from .respondent import FlowState, RespondentFlow
from .export import export_csv, response_table

__all__ = [
    "config", "logger",
    "Answer", "AnswerKind", "render_answer",
    "DashboardStats", "FieldOption", "FieldPosition", "FieldType", "FieldWidth",
    "Form", "FormField", "FormResponse", "FormSettings", "FormStatus", "ValidationRules",
    "BaseFieldType", "FieldTypeRegistry", "get_field_type", "make_answer", "palette", "register_field_type",
    "FormStore", "BuilderSession", "FlowState", "RespondentFlow",
    "export_csv", "response_table",
]
