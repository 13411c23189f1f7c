from enum import Enum
from typing import List

from pydantic import BaseModel


class ChoiceLabel(str, Enum):
    """Labels of the keep/replace/free-text picker."""

    YES = "Yes"
    NO = "No"
    FREE_TEXT = "+"


class ChoiceItem(BaseModel):
    label: str
    description: str = ""
    always_show: bool = False


class ChoiceResult(BaseModel):
    """Item accepted in a picker, plus whatever the user typed into it."""

    item: ChoiceItem
    value: str = ""


def new_message_suggestion(count: int) -> str:
    """Default text offered when asking for a new iteration message."""
    count = max(count, 1)
    return f"{count} new message{'s' if count > 1 else ''}"


def continuation_choices(message: str) -> List[ChoiceItem]:
    return [
        ChoiceItem(
            label=ChoiceLabel.YES.value,
            description=f"Yes, continue with [{message}]",
        ),
        ChoiceItem(label=ChoiceLabel.NO.value, description="No, enter new message"),
        ChoiceItem(
            label=ChoiceLabel.FREE_TEXT.value,
            description="Use entered text as new message",
            always_show=True,
        ),
    ]
