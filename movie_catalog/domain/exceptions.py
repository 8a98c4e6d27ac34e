class DomainError(Exception):
    pass


class UnauthorizedError(DomainError):
    pass


class NotFoundError(DomainError):
    pass


class ConflictError(DomainError):
    pass


class ForbiddenError(DomainError):
    pass


class BadRequestError(DomainError):
    pass


class RepositoryError(DomainError):
    pass


class RecordNotFoundError(RepositoryError):
    pass


class ConstraintViolationError(RepositoryError):
    pass
