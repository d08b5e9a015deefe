import random


def get_random_int(rng: random.Random, lo: int, hi: int) -> int:
    """Uniform integer in [lo, hi)."""
    return rng.randrange(lo, hi)
