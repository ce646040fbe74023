from enum import Enum


class InvalidStatusError(ValueError):
    pass


class TaskStatus(str, Enum):
    """Lifecycle status of a task, shared by validation, storage and the API."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, value) -> "TaskStatus":
        try:
            return cls(value)
        except ValueError:
            raise InvalidStatusError("Invalid status value") from None

    @property
    def label(self) -> str:
        return self.value.replace("-", " ").capitalize()
