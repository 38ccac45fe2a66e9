"""Main C code generation orchestrator.

Assembles the generated source or header file from a resolved graph, in
fixed section order.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "generate_c_header",
    "generate_c_source",
    "write_c_header",
    "write_c_source",
]

import io
from typing import TextIO

from onnxc.build import Graph, check_node_order
from onnxc.generate._entry_gen import render_entry
from onnxc.generate._frontmatter import render_frontmatter
from onnxc.generate._function_gen import render_functions
from onnxc.generate._preamble import render_preamble
from onnxc.generate._templates import HEADER_INCLUDES
from onnxc.generate._tensor_gen import render_globals
from onnxc.options import EmitOptions


def write_c_source(graph: Graph, stream: TextIO, options: EmitOptions | None = None) -> None:
    """Write the complete, self-contained C source for a graph.

    Section order:
    - Provenance comment
    - Includes and helper macros (plus AVR directives)
    - Standalone tensors, then tensor unions
    - One function per node
    - Entry function definition

    :param graph: Resolved graph
    :param stream: Output stream
    :param options: Target options (defaults to a generic target)
    :raises InternalError: If the graph breaks an invariant the emitter relies on
    """
    if options is None:
        options = EmitOptions()

    if options.check_node_order:
        check_node_order(graph)

    render_frontmatter(graph.model, stream)
    stream.write("\n")
    render_preamble(stream, options)
    stream.write("\n")
    render_globals(graph, stream, options)
    stream.write("\n")
    render_functions(graph, stream)
    stream.write("\n")
    render_entry(graph, stream, define=True)


def write_c_header(graph: Graph, stream: TextIO) -> None:
    """Write a header declaring the entry function of a graph.

    :param graph: Resolved graph
    :param stream: Output stream
    """
    render_frontmatter(graph.model, stream)
    stream.write("\n")
    stream.write(HEADER_INCLUDES)
    stream.write("\n")
    render_entry(graph, stream, define=False)


def generate_c_source(graph: Graph, options: EmitOptions | None = None) -> str:
    """Generate the C source for a graph as a string.

    :param graph: Resolved graph
    :param options: Target options
    :return: Generated source code
    """
    stream = io.StringIO()
    write_c_source(graph, stream, options)
    return stream.getvalue()


def generate_c_header(graph: Graph) -> str:
    """Generate the C header for a graph as a string.

    :param graph: Resolved graph
    :return: Generated header code
    """
    stream = io.StringIO()
    write_c_header(graph, stream)
    return stream.getvalue()
