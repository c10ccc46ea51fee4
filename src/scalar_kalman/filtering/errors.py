"""
Errors raised by the scalar filter.
"""

INNOVATION_SCALAR = "Innovation (measurement pre-fit residual `S`)"


class FailedInverse(ValueError):
    """
    Raised when a scalar is too close to zero to be inverted.

    Attributes
    ----------
    scalar : str
        Name of the scalar that could not be inverted.
    """

    def __init__(self, scalar: str = INNOVATION_SCALAR):
        self.scalar = scalar
        super().__init__(f"failed to invert scalar {scalar} in operation")

    def __reduce__(self):
        # Rebuild from the scalar name, not the formatted message
        return (type(self), (self.scalar,))
