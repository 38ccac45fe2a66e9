"""Stage 1: ONNX Model Normalization.

This module loads ONNX models and normalizes them to a form suitable for
graph construction.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "extract_onnx_opset_version",
    "get_onnx_initializers",
    "get_onnx_model_input_names",
    "get_onnx_model_output_names",
    "get_onnx_value_infos",
    "load_and_preprocess_onnx_model",
]

from onnxc.normalize.normalize import load_and_preprocess_onnx_model
from onnxc.normalize.utils import (
    extract_onnx_opset_version,
    get_onnx_initializers,
    get_onnx_model_input_names,
    get_onnx_model_output_names,
    get_onnx_value_infos,
)
