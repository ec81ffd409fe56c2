# all errors subclass ValueError so callers can treat bad input uniformly


class SecretSearchError(ValueError):
    pass


class DecodeError(SecretSearchError):
    """digit string could not be turned into an integer"""


class InvalidInputError(SecretSearchError):
    """malformed test case, e.g duplicate x values or a missing k"""


class InsufficientDataError(SecretSearchError):
    """fewer points than the threshold k"""
