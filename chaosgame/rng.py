import logging
import random
from typing import Optional

logger = logging.getLogger(__name__)


class RNG(random.Random):
    """Random source for vertex picks; remembers the seed it was built from."""

    def __init__(self, seed: int) -> None:
        super().__init__(seed)
        self.initial_seed = seed


def new_rng(seed: Optional[int] = None) -> RNG:
    """
    Build an RNG. Without a seed one is drawn from the OS and logged, so an
    interesting run can be replayed by putting it in the config.
    """
    if seed is None:
        seed = random.SystemRandom().randrange(2**32)
        logger.info("Using random seed %d", seed)
    return RNG(seed)
