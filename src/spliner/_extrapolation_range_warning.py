class ExtrapolationRangeWarning(UserWarning):
    """Warning for an explicit extrapolation interval that does not cover
    the key points."""

    pass
