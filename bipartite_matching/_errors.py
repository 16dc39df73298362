class MatchingError(Exception):
    pass


class AdjacencyError(MatchingError):
    """The adjacency predicate failed for a pair of source values.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, left_value, right_value, reason):
        super().__init__(
            f"error determining adjacency for {left_value!r} and {right_value!r}: "
            f"{reason}"
        )
        self.left_value = left_value
        self.right_value = right_value


class LengthMismatchError(MatchingError, ValueError):
    def __init__(self, left_length, right_length):
        super().__init__(
            "left and right values have mismatched lengths: "
            f"{left_length} and {right_length}"
        )
        self.left_length = left_length
        self.right_length = right_length
