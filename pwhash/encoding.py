"""Text form of a password hash.

    argon2&v=<version>&m=<memory>,t=<iterations>,p=<parallelism>&<salt>&<key>

Salt and key are standard base64 without padding.
"""
import base64
import binascii
import logging
import re

from .errors import IncompatibleVersion, InvalidHashFormat
from .keys import KDF_VERSION
from .params import UINT8_MAX, UINT32_MAX, ParameterSet

logger = logging.getLogger(__name__)

TAG = "argon2"
SEP = "&"
PARAM_SEP = ","

_VERSION_RE = re.compile(r"v=([0-9]{1,10})")
_PARAMS_RE = re.compile(r"m=([0-9]{1,10}),t=([0-9]{1,10}),p=([0-9]{1,3})")
_B64_RE = re.compile(r"[A-Za-z0-9+/]*")


def b64encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii").rstrip("=")


def b64decode(text: str) -> bytes:
    if not _B64_RE.fullmatch(text) or len(text) % 4 == 1:
        raise InvalidHashFormat()
    try:
        return base64.b64decode(text + "=" * (-len(text) % 4), validate=True)
    except binascii.Error as e:
        raise InvalidHashFormat() from e


def encode_hash(params: ParameterSet, salt: bytes, key: bytes) -> str:
    cost = PARAM_SEP.join((f"m={params.memory_cost}", f"t={params.time_cost}",
                           f"p={params.parallelism}"))
    return SEP.join((TAG, f"v={KDF_VERSION}", cost, b64encode(salt), b64encode(key)))


def decode_hash(encoded: str) -> tuple[ParameterSet, bytes, bytes]:
    """Parse an encoded hash into (params, salt, key).

    salt_length and key_length of the returned params come from the decoded
    data, not from any configured defaults.
    """
    if not isinstance(encoded, str):
        raise InvalidHashFormat()
    vals = encoded.split(SEP)
    if len(vals) != 5:
        raise InvalidHashFormat()

    m = _VERSION_RE.fullmatch(vals[1])
    if not m:
        raise InvalidHashFormat()
    version = int(m.group(1))
    if version != KDF_VERSION:
        logger.warning("hash uses argon2 version %d, expected %d", version, KDF_VERSION)
        raise IncompatibleVersion(version, KDF_VERSION)

    m = _PARAMS_RE.fullmatch(vals[2])
    if not m:
        raise InvalidHashFormat()
    memory, iterations, parallelism = (int(g) for g in m.groups())
    if memory > UINT32_MAX or iterations > UINT32_MAX or parallelism > UINT8_MAX:
        raise InvalidHashFormat()

    salt = b64decode(vals[3])
    key = b64decode(vals[4])
    if not salt or not key:
        raise InvalidHashFormat()

    params = ParameterSet(memory_cost=memory, time_cost=iterations,
                          parallelism=parallelism, salt_length=len(salt),
                          key_length=len(key))
    return params, salt, key
