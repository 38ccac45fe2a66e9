"""One C function per computation node."""

__docformat__ = "restructuredtext"
__all__ = ["render_functions"]

from typing import TextIO

from onnxc.build import Graph
from onnxc.generate._templates import FUNCTION_COMMENT_TEMPLATE


def render_functions(graph: Graph, stream: TextIO) -> None:
    """Write a function definition for every non-meta node, in node order.

    :param graph: Graph to emit
    :param stream: Output stream
    """
    for node in graph.nodes:
        if node.is_meta:
            continue

        stream.write(
            FUNCTION_COMMENT_TEMPLATE.format(op_name=node.op_name, onnx_name=node.onnx_name)
        )
        params = node.function_parameters_definition()
        stream.write(f"FUNC_PREFIX void {node.c_name()}({params})\n")
        stream.write("{\n")
        body = node.generate_body()
        stream.write(body)
        if body and not body.endswith("\n"):
            stream.write("\n")
        stream.write("}\n\n")
