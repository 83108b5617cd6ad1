import logging

from cryptography.hazmat.primitives.constant_time import bytes_eq

from .config import params_from_env
from .encoding import decode_hash, encode_hash
from .errors import HasherError, HasherPanic
from .keys import derive_key, generate_salt
from .params import DEFAULT_PARAMS, ParameterSet

logger = logging.getLogger(__name__)


class Hasher:
    """Argon2id password hasher.

    The parameter set is stored as given; Argon2 rejects unusable values when
    hash() runs (KDFError). Verification only ever uses the parameters
    embedded in the stored hash.
    """

    __slots__ = ("_params",)

    def __init__(self, params: ParameterSet | None = None):
        object.__setattr__(self, "_params", DEFAULT_PARAMS if params is None else params)

    def __setattr__(self, name, value):
        raise AttributeError("Hasher is immutable")

    @property
    def params(self) -> ParameterSet:
        return self._params

    @classmethod
    def default(cls) -> "Hasher":
        return cls(DEFAULT_PARAMS)

    @classmethod
    def with_params(cls, params: ParameterSet) -> "Hasher":
        return cls(params)

    @classmethod
    def from_env(cls) -> "Hasher":
        return cls(params_from_env())

    def __repr__(self):
        return f"Hasher({self._params!r})"

    def hash(self, password: str | bytes) -> str:
        """Hash `password` under a fresh random salt.

        Format: "argon2&v=version&m=memory,t=iterations,p=parallelism&salt&key".
        Raises EntropyError if no salt can be generated.
        """
        p = self._params
        salt = generate_salt(p.salt_length)
        key = derive_key(password, salt, p)
        logger.debug("hashed password (m=%d, t=%d, p=%d)", p.memory_cost, p.time_cost, p.parallelism)
        return encode_hash(p, salt, key)

    def compare_password_and_hash(self, password: str | bytes, encoded: str) -> bool:
        """Return whether `password` matches the stored hash `encoded`."""
        params, salt, stored = decode_hash(encoded)
        candidate = derive_key(password, salt, params)
        return bytes_eq(stored, candidate)

    def needs_rehash(self, encoded: str) -> bool:
        """True when `encoded` was produced with other cost parameters
        (memory, time, parallelism) or another key length."""
        params, _, _ = decode_hash(encoded)
        return not params.same_cost(self._params)

    def must_hash(self, password: str | bytes) -> str:
        try:
            return self.hash(password)
        except HasherError as e:
            logger.critical("password hashing failed: %s", e)
            raise HasherPanic(str(e)) from e

    def must_compare_password_and_hash(self, password: str | bytes, encoded: str) -> bool:
        try:
            return self.compare_password_and_hash(password, encoded)
        except HasherError as e:
            logger.critical("password verification failed: %s", e)
            raise HasherPanic(str(e)) from e


_default = Hasher()
def hash_password(password: str | bytes) -> str: return _default.hash(password)
def verify_password(password: str | bytes, stored: str) -> bool: return _default.compare_password_and_hash(password, stored)
