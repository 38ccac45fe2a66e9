"""ONNX model loading and preprocessing."""

__docformat__ = "restructuredtext"
__all__ = ["load_and_preprocess_onnx_model"]

import warnings

import onnx
from onnx import ModelProto, TensorProto, version_converter


def _clear_node_docstrings(model: ModelProto) -> ModelProto:
    """Clear docstrings of all graph nodes.

    The model docstring is kept; it is written to the generated file header.

    :param model: Input ONNX model
    :return: Model with cleared node docstrings
    """
    for node in model.graph.node:
        node.doc_string = ""
    return model


def _check_model(model: ModelProto) -> None:
    """Check ONNX model validity using onnx.checker.

    :param model: Input ONNX model
    :raises ValueError: If model is invalid
    """
    try:
        onnx.checker.check_model(model)
    except (onnx.checker.ValidationError, ValueError, TypeError) as error:
        raise ValueError(f"Invalid ONNX model: {error}") from error


def _convert_version(model: ModelProto, target_opset: int) -> ModelProto:
    """Convert ONNX model to the target opset version.

    :param model: Input ONNX model
    :param target_opset: Target opset version
    :return: Converted model, or the original model if conversion fails
    """
    current_opset = model.opset_import[0].version if model.opset_import else 0
    if current_opset == target_opset:
        return model

    try:
        return version_converter.convert_version(model, target_opset)
    except (ValueError, RuntimeError, AttributeError) as error:
        warnings.warn(
            f"Version conversion from opset {current_opset} to {target_opset} failed: "
            f"{error}. Keeping original opset version.",
            UserWarning,
            stacklevel=2,
        )
        return model


def _infer_shapes(model: ModelProto) -> ModelProto:
    """Run ONNX shape inference, keeping the model unchanged on failure.

    :param model: Input ONNX model
    :return: Model with value_info filled in for intermediate tensors
    """
    try:
        return onnx.shape_inference.infer_shapes(model, strict_mode=False)
    except (onnx.shape_inference.InferenceError, ValueError, RuntimeError) as error:
        warnings.warn(f"Shape inference failed: {error}", UserWarning, stacklevel=2)
        return model


def _fold_constant_nodes(model: ModelProto) -> ModelProto:
    """Move the tensors of Constant nodes into graph initializers.

    Constant nodes produce compile-time data; as initializers they become
    initialized global arrays instead of functions.

    :param model: Input ONNX model
    :return: Model without Constant nodes carrying a "value" tensor
    """
    folded: list[TensorProto] = []
    remaining = []
    for node in model.graph.node:
        value = next((a.t for a in node.attribute if a.name == "value"), None)
        if node.op_type != "Constant" or not node.output or value is None:
            remaining.append(node)
            continue
        tensor = TensorProto()
        tensor.CopyFrom(value)
        tensor.name = node.output[0]
        folded.append(tensor)

    if not folded:
        return model

    model_copy = ModelProto()
    model_copy.CopyFrom(model)
    model_copy.graph.initializer.extend(folded)
    del model_copy.graph.node[:]
    model_copy.graph.node.extend(remaining)
    return model_copy


def load_and_preprocess_onnx_model(
    onnx_path: str,
    target_opset: int | None = None,
    infer_shapes: bool = True,
    check_model: bool = True,
    clear_docstrings: bool = True,
    fold_constants: bool = True,
) -> ModelProto:
    """Load ONNX model and preprocess it for graph construction.

    Preprocessing steps:
    1. Load model from file
    2. Validate with ONNX checker (if enabled)
    3. Convert to target opset version (if specified)
    4. Run shape inference (if enabled)
    5. Fold Constant nodes into initializers (if enabled)
    6. Clear node docstrings (if enabled)

    :param onnx_path: Path to ONNX file
    :param target_opset: Target opset version (None = keep original)
    :param infer_shapes: Whether to run shape inference
    :param check_model: Whether to validate model with onnx.checker
    :param clear_docstrings: Whether to clear node docstrings
    :param fold_constants: Whether to convert Constant nodes to initializers
    :return: Preprocessed model
    """
    model = onnx.load(onnx_path)

    if check_model:
        _check_model(model)

    if target_opset is not None:
        model = _convert_version(model, target_opset)
        if check_model:
            _check_model(model)

    if infer_shapes:
        model = _infer_shapes(model)

    if fold_constants:
        model = _fold_constant_nodes(model)

    if clear_docstrings:
        model = _clear_node_docstrings(model)

    return model
