__docformat__ = "restructuredtext"
__version__ = "2026.1.0"
__all__ = [
    "ONNXC",
    "EmitOptions",
    "InternalError",
]

from onnxc._onnxc import ONNXC
from onnxc.errors import InternalError
from onnxc.options import EmitOptions
