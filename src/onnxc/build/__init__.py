"""Stage 2: Graph Construction.

This module defines the resolved graph consumed by the C emitter and builds
it from normalized ONNX models.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "GRAPH_IO_OP",
    "GRAPH_OUTPUT_NAME",
    "NODE_CLASSES",
    "Graph",
    "GraphIONode",
    "Node",
    "Tensor",
    "TensorUnion",
    "build_graph",
    "check_node_order",
    "get_node_class",
    "register_node_class",
]

from onnxc.build._registry import NODE_CLASSES, get_node_class, register_node_class
from onnxc.build.builder import build_graph
from onnxc.build.types import (
    GRAPH_IO_OP,
    GRAPH_OUTPUT_NAME,
    Graph,
    GraphIONode,
    Node,
    Tensor,
    TensorUnion,
)
from onnxc.build.validate import check_node_order
