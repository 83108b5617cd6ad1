import logging
from os import urandom

from argon2.exceptions import HashingError
from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

from .errors import EntropyError, KDFError
from .params import ParameterSet

logger = logging.getLogger(__name__)

KDF_VERSION = ARGON2_VERSION  # 19 (0x13)


def _secret(password: str | bytes) -> bytes:
    return password.encode("utf-8") if isinstance(password, str) else bytes(password)


def generate_salt(length: int) -> bytes:
    if length < 0:
        raise KDFError(f"salt length must not be negative, got {length}")
    try:
        return urandom(length)
    except OverflowError as e:
        raise KDFError(f"salt length too large: {length}") from e
    except (OSError, NotImplementedError) as e:
        raise EntropyError() from e


def derive_key(password: str | bytes, salt: bytes, params: ParameterSet) -> bytes:
    """Argon2id over (password, salt) with the cost parameters in `params`."""
    logger.debug("deriving key m=%d t=%d p=%d len=%d", params.memory_cost,
                 params.time_cost, params.parallelism, params.key_length)
    # cffi rejects values outside uint32 before the C library sees them
    try:
        return hash_secret_raw(_secret(password), salt, type=Type.ID,
                               version=KDF_VERSION, **params.as_kdf_kwargs())
    except (HashingError, ValueError, OverflowError) as e:
        raise KDFError(str(e)) from e
