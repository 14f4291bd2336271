import logging

from .errors import EmptyQueueError, InvalidArgument, InvalidOperation, QueueError
from .models import QueueConfig
from .pqueue import EMPTY_PRIORITY, PriorityQueue


logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    "EMPTY_PRIORITY",
    "EmptyQueueError",
    "InvalidArgument",
    "InvalidOperation",
    "PriorityQueue",
    "QueueConfig",
    "QueueError",
]
