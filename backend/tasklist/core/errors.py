class StoreError(Exception):
    pass


class StoreUnavailableError(StoreError):
    pass


class UniqueConstraintError(StoreError):
    pass


class ConstraintViolationError(StoreError):
    pass


class AuthenticationError(Exception):
    # Same message whichever credential check failed.
    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class ConfigurationError(RuntimeError):
    pass
