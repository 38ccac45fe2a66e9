"""ONNX element type to C type mapping."""

__docformat__ = "restructuredtext"
__all__ = ["onnx_dtype_to_c_type", "onnx_dtype_to_numpy"]

import numpy as np
from onnx import TensorProto, helper

# ONNX dtype to C type mapping
_ONNX_TO_C_TYPE = {
    TensorProto.FLOAT: "float",
    TensorProto.UINT8: "uint8_t",
    TensorProto.INT8: "int8_t",
    TensorProto.UINT16: "uint16_t",
    TensorProto.INT16: "int16_t",
    TensorProto.INT32: "int32_t",
    TensorProto.INT64: "int64_t",
    TensorProto.BOOL: "bool",
    TensorProto.DOUBLE: "double",
    TensorProto.UINT32: "uint32_t",
    TensorProto.UINT64: "uint64_t",
}


def onnx_dtype_to_c_type(onnx_dtype: int) -> str:
    """Convert ONNX dtype code to the C type used in declarations.

    :param onnx_dtype: ONNX data type code
    :return: C type name (e.g., "float", "int8_t")
    :raises ValueError: If the dtype has no C counterpart
    """
    c_type = _ONNX_TO_C_TYPE.get(onnx_dtype)
    if c_type is None:
        raise ValueError(
            f"Unsupported tensor data type: {TensorProto.DataType.Name(onnx_dtype)}"
        )
    return c_type


def onnx_dtype_to_numpy(onnx_dtype: int) -> np.dtype:
    """Convert ONNX dtype code to numpy dtype.

    :param onnx_dtype: ONNX data type code
    :return: numpy dtype
    """
    return np.dtype(helper.tensor_dtype_to_np_dtype(onnx_dtype))
