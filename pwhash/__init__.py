"""pwhash: Argon2id password hashing with a self-describing hash string."""
from .errors import (HasherError, EntropyError, InvalidHashFormat, IncompatibleVersion,
                     KDFError, InvalidParameters, HasherPanic)
from .params import ParameterSet, DEFAULT_PARAMS, default_params
from .keys import KDF_VERSION, derive_key, generate_salt
from .encoding import encode_hash, decode_hash
from .config import params_from_env
from .hasher import Hasher, hash_password, verify_password
