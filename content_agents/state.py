"""Per-invocation run state shared by the tools and the routing loop."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Union

from configs.database import Database


WordCount = Union[int, float]


class RunStateField(str, Enum):
    COMPLETED = "completed"
    TITLE = "title"
    WORD_COUNT = "word_count"
    SUMMARY = "summary"


class RunState:
    """
    Typed record of one network invocation.

    `completed` is the only value the routing loop consults. It starts false
    and can only be set once; it is never reset within an invocation.
    """

    def __init__(self) -> None:
        self._completed = False
        self.title: Optional[str] = None
        self.word_count: Optional[WordCount] = None
        self.summary: Optional[str] = None

    @property
    def completed(self) -> bool:
        return self._completed

    def get(self, key: RunStateField) -> Any:
        if key is RunStateField.COMPLETED:
            return self._completed
        return getattr(self, key.value)

    def set(self, key: RunStateField, value: Any) -> None:
        if key is RunStateField.COMPLETED:
            if self._completed and not value:
                raise ValueError("completed cannot be reset once set")
            self._completed = bool(value)
            return
        setattr(self, key.value, value)

    def record_completion(self, title: str, word_count: WordCount, summary: str) -> None:
        if isinstance(word_count, float) and word_count.is_integer():
            word_count = int(word_count)
        self.set(RunStateField.TITLE, title)
        self.set(RunStateField.WORD_COUNT, word_count)
        self.set(RunStateField.SUMMARY, summary)
        self.set(RunStateField.COMPLETED, True)

    def to_dict(self) -> Dict[str, Any]:
        return {key.value: self.get(key) for key in RunStateField}


def format_completion_message(title: str, word_count: WordCount, summary: str) -> str:
    return (
        "Content creation finished!\n"
        f'Title: "{title}"\n'
        f"Words: {word_count}\n"
        f"Summary: {summary}"
    )


@dataclass
class ContentRunContext:
    """Context object passed to every tool call of one invocation."""

    database: Database
    state: RunState = field(default_factory=RunState)
