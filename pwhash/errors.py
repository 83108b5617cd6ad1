class HasherError(Exception):
    """Base class for every error the hasher reports."""


class EntropyError(HasherError):
    def __init__(self, msg: str = "random source failed while generating salt"):
        super().__init__(msg)


class InvalidHashFormat(HasherError):
    # Fixed message: the offending hash is never echoed back.
    def __init__(self):
        super().__init__("password hash is invalid")


class IncompatibleVersion(HasherError):
    def __init__(self, found: int, expected: int):
        self.found = found
        self.expected = expected
        super().__init__(
            f"argon2 version {found} is incompatible with hash version {expected}")


class KDFError(HasherError):
    """Argon2 refused the cost parameters."""


class InvalidParameters(KDFError):
    pass


class HasherPanic(RuntimeError):
    """Raised by the must_* helpers. Not a HasherError, so handlers
    written for the regular API let it through."""
