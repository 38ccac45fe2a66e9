"""Graph order verification.

The emitter trusts the node list order. This pass checks that order once,
separately from rendering.
"""

__docformat__ = "restructuredtext"
__all__ = ["check_node_order"]

from onnxc.build.types import Graph, Tensor
from onnxc.errors import InternalError


def _is_preset(tensor: Tensor, produced: set[int], input_names: set[str]) -> bool:
    """Whether a tensor holds its value before the first node runs.

    Constants and graph inputs do, and so does any standalone tensor no node
    writes (internal state). A graph output no node writes does not.
    """
    if tensor.initialize:
        return True
    if tensor.is_io:
        return tensor.name in input_names
    return id(tensor) not in produced


def check_node_order(graph: Graph) -> None:
    """Verify that every node only consumes already available tensors.

    A tensor is available if it is a graph input, an initialized constant,
    a tensor no node produces, or an output of an earlier node. Meta-nodes
    are not checked.

    :param graph: Graph to check
    :raises InternalError: If a node reads a tensor that a later node
        produces, or a graph output that no node produces
    """
    input_names = {value_info.name for value_info in graph.model.graph.input}
    produced = {
        id(t) for node in graph.nodes if not node.is_meta for t in node.outputs if t is not None
    }

    available: set[int] = set()
    for node in graph.nodes:
        if node.is_meta:
            continue
        for tensor in node.inputs:
            if tensor is None or id(tensor) in available:
                continue
            if _is_preset(tensor, produced, input_names):
                available.add(id(tensor))
                continue
            if id(tensor) in produced:
                raise InternalError(
                    f"node {node.onnx_name} ({node.op_name}) reads tensor {tensor.name} "
                    f"before it is produced"
                )
            raise InternalError(
                f"node {node.onnx_name} ({node.op_name}) reads graph output {tensor.name}, "
                f"which no node produces"
            )
        available.update(id(t) for t in node.outputs if t is not None)
