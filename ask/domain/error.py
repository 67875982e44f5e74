"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class UnauthenticatedError(DomainError):
    """Raised when an operation requires a user but none was supplied."""

    def __init__(self, action: str):
        super().__init__(f"Authentication required to {action}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidTargetError(NotFoundError):
    """Raised when a vote target is not an existing question or answer."""

    def __init__(self, target: str):
        super().__init__("Vote target", target)


class AnswerNotFoundError(NotFoundError):
    """Raised when an answer does not exist or belongs to another question."""

    def __init__(self, answer_id: str, question_id: str | None = None):
        self.question_id = question_id
        super().__init__("Answer", answer_id)


class NotQuestionOwnerError(DomainError):
    """Raised when someone other than the question author accepts an answer."""

    def __init__(self, question_id: str, user_id: str):
        self.question_id = question_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not the author of question {question_id}"
        )


class StorageUnavailableError(DomainError):
    """Transient storage failure.

    Operations that fail with this error left no partial state behind and
    may be retried by the caller.
    """

    pass
