"""Utility functions for ONNX model inspection."""

__docformat__ = "restructuredtext"
__all__ = [
    "extract_onnx_opset_version",
    "get_onnx_initializers",
    "get_onnx_model_input_names",
    "get_onnx_model_output_names",
    "get_onnx_value_infos",
]

from onnx import ModelProto, TensorProto, ValueInfoProto


def get_onnx_initializers(model: ModelProto) -> dict[str, TensorProto]:
    """Get all initializer tensors.

    :param model: ONNX model
    :return: Dictionary mapping initializer tensor names to TensorProto
    """
    return {init.name: init for init in model.graph.initializer}


def get_onnx_model_input_names(model: ModelProto) -> list[str]:
    """Get names of the runtime inputs of the model.

    Inputs that also have an initializer are excluded; they hold state that
    is initialized at compile time.

    :param model: ONNX model
    :return: List of input tensor names, in declared order
    """
    initializers = get_onnx_initializers(model)
    return [inp.name for inp in model.graph.input if inp.name not in initializers]


def get_onnx_model_output_names(model: ModelProto) -> list[str]:
    """Get model output tensor names.

    :param model: ONNX model
    :return: List of output tensor names, in declared order
    """
    return [output_info.name for output_info in model.graph.output]


def get_onnx_value_infos(model: ModelProto) -> dict[str, ValueInfoProto]:
    """Get type information of every tensor the model describes.

    Graph inputs and outputs take precedence over value_info entries.

    :param model: ONNX model
    :return: Dictionary mapping tensor names to ValueInfoProto
    """
    value_infos: dict[str, ValueInfoProto] = {}
    for value_info in model.graph.value_info:
        value_infos[value_info.name] = value_info
    for value_info in [*model.graph.input, *model.graph.output]:
        value_infos[value_info.name] = value_info
    return value_infos


def extract_onnx_opset_version(model: ModelProto) -> int:
    """Extract ONNX opset version from model.

    :param model: ONNX model
    :return: Opset version
    """
    if not model.opset_import:
        raise ValueError("Model has no opset_import")

    for opset in model.opset_import:
        if opset.domain == "" or opset.domain == "ai.onnx":
            return opset.version  # type: ignore[no-any-return]

    raise ValueError("Model has no primary opset (domain='' or 'ai.onnx')")
