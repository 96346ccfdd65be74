"""
Answer values

A respondent answer is one variant of a tagged union discriminated by
`kind`. The kind is decided by the field type (see `formcraft.form.element`),
so the respondent flow, the stored responses and the export all share the
same representation.
"""
from datetime import date
from enum import StrEnum
from typing import Annotated, Literal, Optional, Tuple, Union

from pydantic import Field

from formcraft.data import DataModel

from . import config


class AnswerKind(StrEnum):
    TEXT = "text"
    LONG_TEXT = "long_text"
    CHOICE = "choice"
    MULTI_CHOICE = "multi_choice"
    DATE = "date"
    NUMBER = "number"
    FILES = "files"


class BaseAnswer(DataModel):
    def is_empty(self) -> bool:
        raise NotImplementedError

    def render(self) -> str:
        raise NotImplementedError

    @property
    def text(self) -> Optional[str]:
        ''' Raw text for length and pattern rules, None for non textual answers '''
        return None


class TextAnswer(BaseAnswer):
    kind: Literal["text"] = "text"
    value: str = ""

    def is_empty(self):
        return not self.value.strip()

    def render(self):
        return self.value

    @property
    def text(self):
        return self.value


class LongTextAnswer(TextAnswer):
    kind: Literal["long_text"] = "long_text"


class ChoiceAnswer(BaseAnswer):
    kind: Literal["choice"] = "choice"
    value: str = ""

    def is_empty(self):
        return not self.value

    def render(self):
        return self.value


class MultiChoiceAnswer(BaseAnswer):
    kind: Literal["multi_choice"] = "multi_choice"
    values: Tuple[str, ...] = ()

    def is_empty(self):
        return not self.values

    def render(self):
        return config.ANSWER_LIST_SEPARATOR.join(self.values)


class DateAnswer(BaseAnswer):
    kind: Literal["date"] = "date"
    value: Optional[date] = None

    def is_empty(self):
        return self.value is None

    def render(self):
        return "" if self.value is None else self.value.isoformat()


class NumberAnswer(BaseAnswer):
    kind: Literal["number"] = "number"
    value: Optional[Union[int, float]] = None

    def is_empty(self):
        return self.value is None

    def render(self):
        return "" if self.value is None else str(self.value)


class FilesAnswer(BaseAnswer):
    kind: Literal["files"] = "files"
    names: Tuple[str, ...] = ()

    def is_empty(self):
        return not self.names

    def render(self):
        return config.ANSWER_LIST_SEPARATOR.join(self.names)


Answer = Annotated[
    Union[
        TextAnswer,
        LongTextAnswer,
        ChoiceAnswer,
        MultiChoiceAnswer,
        DateAnswer,
        NumberAnswer,
        FilesAnswer,
    ],
    Field(discriminator="kind"),
]


def render_answer(answer: Optional[BaseAnswer]) -> str:
    return "" if answer is None else answer.render()
