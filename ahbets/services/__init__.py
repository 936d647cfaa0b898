"""Service layer — business logic orchestration."""


class ServiceError(Exception):
    """Base service exception."""


class NotFoundError(ServiceError):
    """Resource not found (-> HTTP 404)."""


class NotFoundOnMergeError(NotFoundError):
    """Entity vanished between the existence check and the merge (-> HTTP 404)."""


class BadRequestAlertError(ServiceError):
    """Request rejected before reaching the store (-> HTTP 400).

    Carries the entity tag and a machine-readable ``error_key`` that clients
    use to build a translated message (``error.<error_key>``).
    """

    error_key: str = "badrequest"

    def __init__(self, message: str, entity_name: str, error_key: str | None = None) -> None:
        super().__init__(message)
        self.entity_name = entity_name
        if error_key is not None:
            self.error_key = error_key


class InvalidIdentifierError(BadRequestAlertError):
    """Body carries no ID where one is required."""

    error_key = "idnull"


class IdentifierMismatchError(BadRequestAlertError):
    """Path ID and body ID disagree."""

    error_key = "idinvalid"


class EntityNotFoundError(BadRequestAlertError):
    """Referenced ID does not exist in the store."""

    error_key = "idnotfound"


class IdentifierExistsError(BadRequestAlertError):
    """A new entity was submitted with an ID already set."""

    error_key = "idexists"
