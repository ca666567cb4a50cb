import random
from datetime import datetime


def make_random(seed=None):
    # Default to the current timestamp when no seed is given
    if seed is None:
        seed = int(datetime.now().timestamp() * 1000)
    return random.Random(seed), seed
