from either_utils.lift import lift, lift_with_value
from either_utils.pipeline import failures, lift_map, partition, successes
from either_utils.result import Failure, Pair, Result, Success

__all__ = [
    "Result",
    "Failure",
    "Success",
    "Pair",
    "lift",
    "lift_with_value",
    "lift_map",
    "successes",
    "failures",
    "partition",
]
