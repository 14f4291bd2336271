import heapq
import logging
from collections import deque
from typing import Any, Generic, Iterator, TypeVar, Union

from .errors import EmptyQueueError
from .models import QueueConfig, load_config, validate_priority


T = TypeVar("T")

EMPTY_PRIORITY = -1

logger = logging.getLogger(__name__)


class PriorityQueue(Generic[T]):
    """
    FIFO collection of items grouped by integer priority.

    Items at the highest priority (the smallest number, unless the config
    says otherwise) are served first, and items sharing a priority come
    out in the order they went in.
    """

    def __init__(self, config: Union[QueueConfig, dict, None] = None, **options):
        self.config = load_config(config, options)
        self.buckets: dict[int, deque[T]] = {}
        self.heap: list[tuple[Any, int]] = []
        self.highest = EMPTY_PRIORITY

    def __bool__(self):
        return bool(self.buckets)

    def __len__(self):
        return self.count

    def __contains__(self, item: T):
        return self.contains_item(item)

    def __iter__(self) -> Iterator[T]:
        for priority in self.priorities():
            yield from self.buckets[priority]

    def __repr__(self):
        name = f" {self.config.name!r}" if self.config.name else ""
        if not self.buckets:
            return f"<PriorityQueue{name} empty>"
        return f"<PriorityQueue{name} count={self.count} highest={self.highest}>"

    @property
    def is_empty(self) -> bool:
        return not self.buckets

    @property
    def count(self) -> int:
        return sum(len(bucket) for bucket in self.buckets.values())

    @property
    def highest_priority(self) -> int:
        """
        The priority whose items will be served next.
        """
        if not self.buckets:
            raise EmptyQueueError()
        return self.highest

    def contains_priority(self, priority: int) -> bool:
        try:
            return priority in self.buckets
        except TypeError:
            return False

    def contains_item(self, item: T) -> bool:
        return any(entry == item for entry in self)

    def count_priority(self, priority: int) -> int:
        if not self.contains_priority(priority):
            return 0
        return len(self.buckets[priority])

    def priorities(self) -> list[int]:
        """
        Return the priorities currently holding items, highest first.
        """
        return [priority for _, priority in sorted(self.heap)]

    def items(self) -> Iterator[tuple[int, T]]:
        for priority in self.priorities():
            for item in self.buckets[priority]:
                yield priority, item

    def enqueue(self, priority: int, item: T):
        """
        Add an item to the back of the bucket for the given priority.
        """
        priority = validate_priority(priority)
        bucket = self.buckets.get(priority)
        if bucket is None:
            heapq.heappush(self.heap, (self.config.sort_key(priority), priority))
            self.buckets[priority] = deque([item])
            self.highest = self.heap[0][-1]
            logger.debug("%r: created bucket for priority %d", self, priority)
        else:
            bucket.append(item)

    def dequeue(self) -> T:
        """
        Remove and return the first item of the highest priority.
        """
        if not self.buckets:
            raise EmptyQueueError()
        priority = self.highest
        bucket = self.buckets[priority]
        item = bucket.popleft()
        if not bucket:
            # The emptied bucket is the head bucket, so its key is heap[0].
            heapq.heappop(self.heap)
            del self.buckets[priority]
            self.highest = self.heap[0][-1] if self.heap else EMPTY_PRIORITY
            logger.debug("%r: removed empty bucket for priority %d", self, priority)
        return item

    def peek(self) -> T:
        """
        Return the first item of the highest priority without removing it.
        """
        if not self.buckets:
            raise EmptyQueueError()
        return self.buckets[self.highest][0]

    def drain(self) -> Iterator[T]:
        while self.buckets:
            yield self.dequeue()

    def clear(self):
        self.buckets = {}
        self.heap = []
        self.highest = EMPTY_PRIORITY
        logger.debug("%r: cleared", self)
