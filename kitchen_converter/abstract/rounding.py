import math


def round_half_up(value: float) -> int:
    # round() would round 100.5 to the even 100
    return int(math.floor(value + 0.5))
