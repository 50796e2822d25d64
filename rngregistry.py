import threading
from typing import Dict, Optional

from models import SeedInput
from simplerng import DEFAULT_M_W, DEFAULT_M_Z, SimpleRNG


class RNGConfig:
    M_W: int
    M_Z: int
    SEED: Optional[SeedInput]
    LOGGING_ON: bool

    DEFAULT_STATE: Dict = {
        "m_w": DEFAULT_M_W,
        "m_z": DEFAULT_M_Z
    }

    def __init__(
            self,
            M_W = DEFAULT_STATE["m_w"],
            M_Z = DEFAULT_STATE["m_z"],
            SEED = None,
            LOGGING_ON = False,
        ):
        self.M_W = M_W
        self.M_Z = M_Z
        self.SEED = SEED
        self.LOGGING_ON = LOGGING_ON

    def build(self) -> SimpleRNG:
        rng = SimpleRNG(m_w=self.M_W, m_z=self.M_Z, logging_on=self.LOGGING_ON)
        if self.SEED is not None:
            rng.seed(self.SEED)
        return rng


# у каждого потока свой генератор, общего состояния нет
_local = threading.local()


def instance(config: Optional[RNGConfig] = None) -> SimpleRNG:
    rng = getattr(_local, "rng", None)
    if rng is None:
        config = config if config is not None else RNGConfig()
        rng = config.build()
        rng.log(f"created for thread {threading.get_ident()}")
        _local.rng = rng
    return rng


def reset():
    if hasattr(_local, "rng"):
        del _local.rng
