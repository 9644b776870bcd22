"""
Custom exceptions for the application.
Centralized error handling for the domain store and its consumers.
"""


class SalonError(Exception):
    """Base class for all application errors."""

    pass


class CorruptedCollectionError(SalonError):
    """
    Raised by a record store when a stored collection cannot be parsed.
    The data store catches it and reseeds only that collection.
    """

    def __init__(self, collection: str, reason: str):
        self.collection = collection
        self.reason = reason
        super().__init__(f"Stored collection '{collection}' is corrupted: {reason}")


class UnknownCollectionError(SalonError):
    """Raised when a consumer names a collection the store does not own."""

    def __init__(self, collection: str):
        self.collection = collection
        super().__init__(f"Unknown collection: {collection}")


class ScheduleOverflowError(SalonError):
    """
    Raised when an appointment would end at or after midnight.
    Appointments never wrap into the next day.
    """

    def __init__(self, start_time: str, total_duration: int):
        self.start_time = start_time
        self.total_duration = total_duration
        super().__init__(
            f"Appointment starting at {start_time} lasting {total_duration} "
            "minutes would end after midnight"
        )


class AppendOnlyCollectionError(SalonError):
    """Raised on update or delete against a collection that only grows."""

    def __init__(self, collection: str, operation: str):
        self.collection = collection
        self.operation = operation
        super().__init__(f"Collection '{collection}' is append-only; {operation} refused")
