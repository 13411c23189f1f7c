"""User prompt protocol."""

from typing import List, Optional, Protocol, runtime_checkable

from ..schemas import ChoiceItem, ChoiceResult


@runtime_checkable
class PromptServiceProtocol(Protocol):
    """Text inputs and pickers shown to the user.

    Every ``ask_*`` call is a suspension point with no timeout. A dismissed
    prompt returns ``None``.
    """

    async def ask_text(
        self, prompt: str, placeholder: str, value: Optional[str] = None
    ) -> Optional[str]:
        ...

    async def ask_choice(
        self, items: List[ChoiceItem], placeholder: Optional[str] = None
    ) -> Optional[ChoiceResult]:
        ...

    def show_warning(self, message: str) -> None:
        ...
