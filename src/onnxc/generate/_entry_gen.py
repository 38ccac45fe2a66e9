"""The public entry function.

Its parameters are the model's runtime inputs, read-only, followed by the
graph outputs, writable. The definition calls every node function in node
order; the node list is already in dependency order.
"""

__docformat__ = "restructuredtext"
__all__ = ["render_entry"]

from typing import TextIO

from onnxc.build import Graph
from onnxc.errors import InternalError
from onnxc.generate._templates import ENTRY_FUNCTION_NAME, INDENT


def _entry_parameters(graph: Graph) -> list[str]:
    """Build the entry function's parameter declarations.

    Declared inputs that are not IO tensors hold state initialized at
    compile time and are left out. Graph outputs lose their const
    qualifier, since the caller supplies writable buffers for them.

    :param graph: Graph to emit
    :return: Parameter declarations, inputs first
    :raises InternalError: If the graph has no output sink
    """
    params = []
    for value_info in graph.model.graph.input:
        tensor = graph.find_tensor(value_info.name)
        if tensor is not None and tensor.is_io:
            params.append(tensor.declaration(as_const=True))

    if graph.output_sink is None:
        raise InternalError("no graph_output node")

    for tensor in graph.output_sink.inputs:
        if tensor is None:
            continue
        # Contrived graphs (unit tests) can have a constant as their output
        tensor.is_const = False
        params.append(tensor.declaration())

    return params


def render_entry(graph: Graph, stream: TextIO, define: bool) -> None:
    """Write the entry function's declaration or definition.

    .. note::
        Every tensor feeding the output sink has ``is_const`` cleared in
        place. A constant graph output therefore loses its const qualifier
        in any later emission of the same ``Graph`` object, including its
        global declaration. Rebuild the graph to emit it again unchanged.

    :param graph: Graph to emit
    :param stream: Output stream
    :param define: Write the full definition instead of a forward declaration
    """
    params = ", ".join(_entry_parameters(graph))
    stream.write(f"void {ENTRY_FUNCTION_NAME}({params})")

    if not define:
        stream.write(";\n")
        return

    stream.write("\n{\n")
    for node in graph.nodes:
        if node.is_meta:
            continue
        stream.write(f"{INDENT}{node.c_name()}({node.function_parameters_callsite()});\n")
    stream.write("}\n")
