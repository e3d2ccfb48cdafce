from typing import Literal, TypeAlias

from stabtree.interval import Interval

Reason: TypeAlias = Literal["unbounded", "open", "not_numeric", "non_finite"]


class InvalidInterval(ValueError):
    """Raised while building a tree from an interval it cannot store.

    Attributes:
        interval: The offending interval
        reason: Which constraint it broke
    """

    def __init__(self, interval: Interval, reason: Reason, message: str):
        super().__init__(message)
        self.interval: Interval = interval
        self.reason: Reason = reason
