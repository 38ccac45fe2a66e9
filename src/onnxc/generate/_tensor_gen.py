"""Global tensor storage: standalone declarations and tensor unions."""

__docformat__ = "restructuredtext"
__all__ = ["render_globals", "render_tensor"]

import warnings
from typing import TextIO

from onnxc.build import Graph, Tensor
from onnxc.errors import InternalError
from onnxc.generate._utils import format_tensor_initializer
from onnxc.options import EmitOptions


def render_tensor(tensor: Tensor, stream: TextIO, options: EmitOptions) -> None:
    """Write the declaration of one tensor.

    Tensors without a name or not marked for generation are skipped
    silently. Union members get no storage class; the enclosing union
    provides it.

    :param tensor: Tensor to declare
    :param stream: Output stream
    :param options: Target options; AVR targets place const data in PROGMEM
    :raises InternalError: If the tensor has no dimensions
    """
    if not tensor.generate or not tensor.name:
        return
    if len(tensor.data_dim) == 0:
        raise InternalError(f"tensor {tensor.name} has no dimensions")
    # Seen in models in the wild
    if len(tensor.data_dim) == 1 and tensor.data_dim[0] == 0:
        warnings.warn(
            f"Tensor {tensor.name} has size of 0. Skipping it", UserWarning, stacklevel=2
        )
        return

    if tensor.union_no < 0:
        stream.write("static ")
    stream.write(tensor.declaration())

    if tensor.initialize:
        if options.target_avr and tensor.is_const:
            stream.write(" PROGMEM")
        stream.write(" =\n")
        stream.write(format_tensor_initializer(tensor))

    stream.write(";\n")


def render_globals(graph: Graph, stream: TextIO, options: EmitOptions) -> None:
    """Write all global tensor storage.

    Standalone tensors come first, in tensor list order. Then each union is
    written as a union type holding its members, in tensor list order,
    followed by its single static instance ``tu<N>``.

    :param graph: Graph to emit
    :param stream: Output stream
    :param options: Target options
    """
    for tensor in graph.tensors:
        if tensor.union_no < 0 and tensor.generate:
            render_tensor(tensor, stream, options)

    for union in graph.tensor_unions:
        stream.write(f"union {union.type_name} {{\n")
        for tensor in graph.tensors:
            if tensor.union_no == union.index:
                render_tensor(tensor, stream, options)
        stream.write("};\n")
        stream.write(f"static union {union.type_name} {union.instance_name};\n\n")
