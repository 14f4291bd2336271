class QueueError(Exception):
    pass


class InvalidArgument(QueueError, ValueError):
    pass


class InvalidOperation(QueueError, IndexError):
    pass


class EmptyQueueError(InvalidOperation):
    def __init__(self, message: str = "queue is empty"):
        super().__init__(message)
