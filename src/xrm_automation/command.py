"""Define the models for browser commands and their results."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class CommandOptions(BaseModel):
    """Define Model for the options of a browser command."""

    name: str
    think_time: float = Field(default=0.0, ge=0.0)


class CommandResult(BaseModel, Generic[T]):
    """Define Model for the result of a browser command."""

    name: str
    value: T
    success: bool = True
    execution_time: float = 0.0
    think_time: float = 0.0

    def __bool__(self) -> bool:
        """Evaluate to True if the command succeeded and returned a truthy value."""

        return self.success and bool(self.value)
