"""Utility functions for C code generation.

Helper functions for formatting constant tensor data as C literals.
"""

__docformat__ = "restructuredtext"
__all__ = ["format_c_element", "format_tensor_initializer"]

from typing import Any

import numpy as np
from onnx import TensorProto

from onnxc.build import Tensor
from onnxc.errors import InternalError
from onnxc.generate._templates import INITIALIZER_INDENT

# Outside this range floats are written in scientific notation
_POSITIONAL_MIN = 1e-4
_POSITIONAL_MAX = 1e16

_INT64_MIN = -(2**63)


def _format_float(value: np.floating) -> str:
    """Format a finite float with the fewest digits that round-trip.

    :param value: numpy float32 or float64 scalar
    :return: Decimal literal without suffix (e.g., "0.5", "1.0", "1.5e-07")
    """
    magnitude = abs(float(value))
    if magnitude != 0.0 and not (_POSITIONAL_MIN <= magnitude < _POSITIONAL_MAX):
        return np.format_float_scientific(value, unique=True, trim="0")
    return np.format_float_positional(value, unique=True, trim="0")


def format_c_element(value: Any, onnx_dtype: int) -> str:
    """Format one tensor element as a C literal.

    Handles float (with "f" suffix), double, bool and integer types.
    Non-finite values use the math.h macros. 64-bit integers carry an
    "LL" or "ULL" suffix.

    :param value: Element value
    :param onnx_dtype: ONNX data type code of the tensor
    :return: C literal string
    """
    if onnx_dtype == TensorProto.BOOL:
        return "true" if value else "false"

    if onnx_dtype in (TensorProto.FLOAT, TensorProto.DOUBLE):
        if np.isnan(value):
            return "NAN"
        if np.isinf(value):
            return "INFINITY" if value > 0 else "-INFINITY"
        if onnx_dtype == TensorProto.FLOAT:
            return _format_float(np.float32(value)) + "f"
        return _format_float(np.float64(value))

    value = int(value)
    if onnx_dtype == TensorProto.INT64:
        if value == _INT64_MIN:
            # -9223372036854775808LL would negate an out of range literal
            return "(-9223372036854775807LL - 1)"
        return f"{value}LL"
    if onnx_dtype == TensorProto.UINT64:
        return f"{value}ULL"
    return str(value)


def _format_nested(data: np.ndarray, onnx_dtype: int, depth: int) -> str:
    pad = INITIALIZER_INDENT * depth
    if data.ndim == 1:
        elements = ", ".join(format_c_element(v, onnx_dtype) for v in data)
        return f"{pad}{{{elements}}}"
    rows = ",\n".join(_format_nested(row, onnx_dtype, depth + 1) for row in data)
    return f"{pad}{{\n{rows}\n{pad}}}"


def format_tensor_initializer(tensor: Tensor) -> str:
    """Format constant tensor data as a nested brace initializer.

    The nesting matches ``tensor.data_dim``; the innermost dimension is
    written on one line.

    Example for shape [2, 2]::

        {
          {1.0f, 2.0f},
          {3.0f, 4.0f}
        }

    :param tensor: Tensor with constant data
    :return: Initializer text, without trailing newline
    :raises InternalError: If the tensor has no data
    """
    if tensor.data is None:
        raise InternalError(f"tensor {tensor.name} is marked for initialization but has no data")
    data = np.asarray(tensor.data).reshape(tensor.data_dim)
    return _format_nested(data, tensor.data_type, 0)
