"""
Exceptions raised by the agro-climatic engine.
"""


class PreconditionError(ValueError):
    """
    Raised when the engine is called with arguments it cannot work with,
    such as an empty crop profile list or a negative forecast horizon.
    """
