"""Exception types raised by onnxc."""

__docformat__ = "restructuredtext"
__all__ = ["InternalError"]


class InternalError(RuntimeError):
    """Broken invariant of the graph handed to the emitter.

    Raised when the graph construction stage produced something the emitter
    can not work with. This is a compiler bug, not a problem with the model.
    """

    def __init__(self, message: str):
        super().__init__(f"internal onnxc error: {message}")
