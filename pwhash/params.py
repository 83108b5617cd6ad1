from dataclasses import dataclass, fields

from .errors import InvalidParameters

UINT8_MAX = 0xFF
UINT32_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class ParameterSet:
    memory_cost: int   # KiB
    time_cost: int     # iterations
    parallelism: int   # lanes
    salt_length: int   # bytes
    key_length: int    # bytes

    def validate(self) -> "ParameterSet":
        """Optional upfront check. Argon2 itself also rejects unusable values,
        but only once hash() runs."""
        for f in fields(self):
            value = getattr(self, f.name)
            limit = UINT8_MAX if f.name == "parallelism" else UINT32_MAX
            if not isinstance(value, int) or not 0 < value <= limit:
                raise InvalidParameters(f"{f.name} must be in 1..{limit}, got {value!r}")
        return self

    def as_kdf_kwargs(self) -> dict:
        return dict(time_cost=self.time_cost, memory_cost=self.memory_cost,
                    parallelism=self.parallelism, hash_len=self.key_length)

    def same_cost(self, other: "ParameterSet") -> bool:
        return self.as_kdf_kwargs() == other.as_kdf_kwargs()


DEFAULT_PARAMS = ParameterSet(memory_cost=64 * 1024, time_cost=3, parallelism=2,
                              salt_length=16, key_length=32)


def default_params() -> ParameterSet:
    return DEFAULT_PARAMS
