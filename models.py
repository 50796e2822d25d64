import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

# ================ #
#  ВХОДЫ СИДА      #
# ================ #

class InvalidSeedArgument(ValueError):
    pass


def validate_seed_value(value):
    try:
        magnitude = abs(float(value))
    except (TypeError, ValueError):
        raise InvalidSeedArgument(f"Seed must be numeric, got {value!r}")
    if not magnitude > 0:
        raise InvalidSeedArgument("Seeds must be strictly positive")
    if not math.isfinite(magnitude):
        raise InvalidSeedArgument(f"Seed must be finite, got {value!r}")
    return value


def seed_to_int(value) -> int:
    # "4.5" не проходит через int() напрямую
    try:
        return int(value)
    except (TypeError, ValueError):
        return int(float(value))


@dataclass(frozen=True)
class TwoValues:
    w: float
    z: float

    def __post_init__(self):
        validate_seed_value(self.w)
        validate_seed_value(self.z)


@dataclass(frozen=True)
class SingleValue:
    z: float

    def __post_init__(self):
        validate_seed_value(self.z)


@dataclass(frozen=True)
class Timestamp:
    moment: Optional[datetime] = None

    def to_micros(self) -> int:
        moment = self.moment if self.moment is not None else datetime.now()
        return int(moment.timestamp() * 1000000)


SeedInput = Union[TwoValues, SingleValue, Timestamp]


def seed_input_from_args(*args) -> SeedInput:
    if len(args) > 2:
        raise InvalidSeedArgument(f"Expected at most two seeds, got {len(args)}")
    if len(args) == 2:
        return TwoValues(*args)
    if len(args) == 0 or args[0] is None:
        return Timestamp()

    value = args[0]
    if isinstance(value, (TwoValues, SingleValue, Timestamp)):
        return value
    if isinstance(value, datetime):
        return Timestamp(value)
    return SingleValue(value)
