from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from typing import Annotated, Any, Callable, Optional, Union

from .errors import InvalidArgument


Priority = Annotated[int, Field(ge=0, strict=True)]
priority_adapter = TypeAdapter(Priority)


def validate_priority(value: Any) -> int:
    try:
        return priority_adapter.validate_python(value)
    except ValidationError as e:
        if any(error["type"] == "greater_than_equal" for error in e.errors()):
            raise InvalidArgument("priority must be non-negative") from e
        raise InvalidArgument("priority must be an integer") from e


class Descending:
    """
    Wraps an ordering value so that heapq serves the largest value first.
    """
    __slots__ = ("value",)

    def __init__(self, value: Any):
        self.value = value

    def __eq__(self, other: object):
        return isinstance(other, Descending) and self.value == other.value

    def __lt__(self, other: "Descending"):
        return other.value < self.value

    def __repr__(self):
        return f"Descending({self.value!r})"


class QueueConfig(BaseModel):
    """
    Ordering rule and label for a PriorityQueue.

    With no options priorities are served smallest number first. `key`
    maps a priority to the value it is ordered by, so a comparator can be
    plugged in with functools.cmp_to_key. `reverse` inverts whichever
    order is in effect.
    """
    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    key: Optional[Callable[[int], Any]] = None
    reverse: bool = False
    name: Optional[str] = None

    def sort_key(self, priority: int) -> Any:
        value = priority if self.key is None else self.key(priority)
        if self.reverse:
            return Descending(value)
        return value


def load_config(config: Union[QueueConfig, dict, None], options: dict) -> QueueConfig:
    if config is not None and options:
        raise InvalidArgument("pass either a config or keyword options, not both")
    try:
        if isinstance(config, QueueConfig):
            return config
        elif config is not None:
            return QueueConfig.model_validate(config)
        else:
            return QueueConfig(**options)
    except ValidationError as e:
        raise InvalidArgument(f"invalid queue options: {e}") from e
