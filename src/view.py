"""
Per-instance state of one generation form.

A view is always in exactly one ViewState. `submit` moves it
IDLE/SUCCESS/FAILURE -> LOADING -> SUCCESS | FAILURE; blank input or a
submission already in flight leaves it untouched.
"""

import enum
import logging
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

from src.errors import GenerationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

UNEXPECTED_MESSAGE = "An unexpected error occurred. Please try again."


class ViewState(str, enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


class GenerationView(Generic[T]):
    def __init__(self, adapter: Callable[[str], Awaitable[T]], value: str = "", placeholder: str = ""):
        self.adapter = adapter
        self.value = value
        self.placeholder = placeholder
        self.state = ViewState.IDLE
        self.result: Optional[T] = None
        self.error: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        return self.state is ViewState.LOADING

    def can_submit(self) -> bool:
        return bool(self.value.strip()) and not self.is_loading

    async def submit(self, value: Optional[str] = None) -> bool:
        """Run one submission; returns False when the guard rejected it."""
        if self.is_loading:
            return False
        if value is not None:
            self.value = value
        if not self.value.strip():
            return False

        self.error = None
        self.result = None
        self.state = ViewState.LOADING
        try:
            result: Any = await self.adapter(self.value)
        except GenerationError as exc:
            self._fail(exc.message)
        except Exception:
            logger.exception("Unexpected failure while generating")
            self._fail(UNEXPECTED_MESSAGE)
        except BaseException:
            # cancelled mid-flight; never leave the view stuck in LOADING
            self._fail(UNEXPECTED_MESSAGE)
            raise
        else:
            self.result = result
            self.state = ViewState.SUCCESS
        return True

    def _fail(self, message: str) -> None:
        self.error = message
        self.state = ViewState.FAILURE
