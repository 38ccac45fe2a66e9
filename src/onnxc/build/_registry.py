"""Node class registry.

Per-operator generators register a Node subclass for each ONNX operator
type they implement. The graph builder looks nodes up here.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "NODE_CLASSES",
    "get_node_class",
    "register_node_class",
]

from onnxc.build.types import Node

# Global node class registry
NODE_CLASSES: dict[str, type[Node]] = {}


def register_node_class(onnx_op_type: str, node_class: type[Node]) -> None:
    """Register the node class generating code for an ONNX operator.

    :param onnx_op_type: ONNX operator type (e.g., "Relu", "Conv")
    :param node_class: Node subclass implementing the operator
    """
    NODE_CLASSES[onnx_op_type] = node_class


def get_node_class(onnx_op_type: str) -> type[Node] | None:
    """Get the node class for an ONNX operator type.

    :param onnx_op_type: ONNX operator type
    :return: Node subclass or None if not registered
    """
    return NODE_CLASSES.get(onnx_op_type)
