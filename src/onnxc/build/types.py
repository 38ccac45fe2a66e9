"""Stage 2: Graph Type Definitions.

Defines the resolved graph handed to the C emitter: tensors, tensor unions,
computation nodes and the graph itself. Node and tensor order is significant;
the emitter writes everything in list order.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "GRAPH_IO_OP",
    "GRAPH_OUTPUT_NAME",
    "Graph",
    "GraphIONode",
    "Node",
    "Tensor",
    "TensorUnion",
]

import math
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from onnx import ModelProto, TensorProto, ValueInfoProto, numpy_helper

from onnxc.build._type_mapping import onnx_dtype_to_c_type, onnx_dtype_to_numpy
from onnxc.build._utils import sanitize_c_identifier

GRAPH_IO_OP = "graph_io"
GRAPH_OUTPUT_NAME = "graph_output"


@dataclass(eq=False)
class Tensor:
    """Named, dimensioned storage unit.

    :param name: ONNX tensor name (empty means anonymous, never emitted)
    :param data_dim: Shape, one entry per dimension
    :param data_type: ONNX element type code
    :param generate: Whether the tensor gets a global declaration at all
    :param initialize: Whether the declaration carries constant data
    :param is_const: Whether the declaration is const qualified
    :param is_io: Whether the tensor is part of the entry function signature
    :param union_no: Union group index, -1 for standalone storage
    :param data: Constant data (required when ``initialize`` is set)
    """

    name: str
    data_dim: list[int]
    data_type: int = TensorProto.FLOAT
    generate: bool = True
    initialize: bool = False
    is_const: bool = False
    is_io: bool = False
    union_no: int = -1
    data: np.ndarray | None = None

    @classmethod
    def from_initializer(cls, initializer: TensorProto) -> "Tensor":
        """Create a constant, initialized tensor from an ONNX initializer.

        Scalars are stored as one-element arrays.

        :param initializer: ONNX initializer
        :return: Tensor with ``initialize`` and ``is_const`` set
        """
        data = numpy_helper.to_array(initializer)
        return cls(
            name=initializer.name,
            data_dim=list(data.shape) or [1],
            data_type=initializer.data_type,
            generate=True,
            initialize=True,
            is_const=True,
            data=data,
        )

    @classmethod
    def from_value_info(cls, value_info: ValueInfoProto, is_io: bool = False) -> "Tensor":
        """Create a non-constant tensor from ONNX tensor type information.

        A symbolic first (batch) dimension becomes 1. Any other symbolic or
        missing dimension is rejected. Scalars become ``[1]``. Graph inputs
        and outputs are entry function parameters and get no global storage;
        every other tensor is a global buffer.

        :param value_info: ONNX value info
        :param is_io: Whether the tensor is a graph input or output
        :return: Tensor
        :raises ValueError: If the shape can not be determined statically
        """
        tensor_type = value_info.type.tensor_type
        if not tensor_type.HasField("shape"):
            raise ValueError(
                f"Tensor {value_info.name} has no static shape. "
                f"Run shape inference or fix the model inputs."
            )

        dims = []
        for axis, dim in enumerate(tensor_type.shape.dim):
            if dim.HasField("dim_value"):
                dims.append(dim.dim_value)
            elif axis == 0 and dim.dim_param:
                dims.append(1)
            else:
                raise ValueError(
                    f"Tensor {value_info.name} has no static shape "
                    f"(dimension {axis} is unknown). Run shape inference or fix the model inputs."
                )

        return cls(
            name=value_info.name,
            data_dim=dims or [1],
            data_type=tensor_type.elem_type,
            generate=not is_io,
            is_io=is_io,
        )

    @property
    def cname(self) -> str:
        return "tensor_" + sanitize_c_identifier(self.name)

    @property
    def callsite_name(self) -> str:
        """Name used to pass the tensor as a function argument."""
        if self.union_no >= 0:
            return f"tu{self.union_no}.{self.cname}"
        return self.cname

    @property
    def c_type(self) -> str:
        return onnx_dtype_to_c_type(self.data_type)

    @property
    def num_elements(self) -> int:
        return math.prod(self.data_dim)

    @property
    def size_bytes(self) -> int:
        return self.num_elements * onnx_dtype_to_numpy(self.data_type).itemsize

    def declaration(self, as_const: bool = False) -> str:
        """Format the typed, dimensioned declaration of this tensor.

        :param as_const: Add a const qualifier even if the tensor is not const
        :return: Declaration without storage class or terminator
            (e.g., "const float tensor_W[2][3]")
        """
        qualifier = "const " if self.is_const or as_const else ""
        dims = "".join(f"[{dim}]" for dim in self.data_dim)
        return f"{qualifier}{self.c_type} {self.cname}{dims}"


@dataclass(eq=False)
class TensorUnion:
    """Group of tensors sharing one storage block.

    Members have non-overlapping lifetimes, so the block is only as large as
    its largest member.

    :param index: Position in the graph's union list
    :param tensors: Members, in tensor list order
    """

    index: int
    tensors: list[Tensor] = field(default_factory=list)

    @property
    def type_name(self) -> str:
        return f"tensor_union_{self.index}"

    @property
    def instance_name(self) -> str:
        return f"tu{self.index}"

    @property
    def size_bytes(self) -> int:
        return max((t.size_bytes for t in self.tensors), default=0)


class Node:
    """One computation step, rendered as one C function.

    Per-operator generators subclass this, set ``op_name`` and implement
    :meth:`generate_body`. The default parameter list passes every input as
    a const array followed by every output.

    :param onnx_name: Node name in the ONNX file
    :param inputs: Input tensors in ONNX order (None for omitted optional inputs)
    :param outputs: Output tensors in ONNX order (None for omitted optional outputs)
    :param attributes: Parsed ONNX attributes
    """

    op_name: str = ""

    def __init__(
        self,
        onnx_name: str,
        inputs: list[Tensor | None],
        outputs: list[Tensor | None],
        attributes: dict[str, Any] | None = None,
    ):
        self.onnx_name = onnx_name
        self.inputs = inputs
        self.outputs = outputs
        self.attributes = attributes if attributes is not None else {}
        # Set by the graph builder, unique within one graph
        self.function_name: str | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.op_name!r}, {self.onnx_name!r})"

    @property
    def is_meta(self) -> bool:
        return self.op_name == GRAPH_IO_OP

    def c_name(self) -> str:
        if self.function_name is not None:
            return self.function_name
        return "node_" + sanitize_c_identifier(self.onnx_name)

    def function_parameters_definition(self) -> str:
        """Format the parameter list of this node's function.

        :return: Comma separated declarations
            (e.g., "const float tensor_X[1][3], float tensor_Y[1][3]")
        """
        params = [t.declaration(as_const=True) for t in self.inputs if t is not None]
        params += [t.declaration() for t in self.outputs if t is not None]
        return ", ".join(params)

    def function_parameters_callsite(self) -> str:
        """Format the argument list used to call this node's function.

        :return: Comma separated argument names, union members qualified by their union
        """
        args = [t.callsite_name for t in self.inputs if t is not None]
        args += [t.callsite_name for t in self.outputs if t is not None]
        return ", ".join(args)

    def generate_body(self) -> str:
        """Generate the statements inside this node's function.

        :return: Function body, each line newline terminated
        """
        raise NotImplementedError(f"{type(self).__name__} does not generate a function body")


class GraphIONode(Node):
    """Meta-node collecting the graph outputs.

    Never rendered as a function; its inputs are the entry function's
    output parameters.
    """

    op_name = GRAPH_IO_OP

    def __init__(self, onnx_name: str, inputs: list[Tensor | None]):
        super().__init__(onnx_name, inputs, [])


@dataclass
class Graph:
    """Fully resolved graph, ready for emission.

    :param model: Source ONNX model (metadata and declared inputs/outputs)
    :param tensors: All tensors, in declaration order
    :param nodes: All nodes, in dependency order
    :param tensor_unions: Union groups, indexed by ``Tensor.union_no``
    :param output_sink: Meta-node whose inputs are the graph outputs
    """

    model: ModelProto
    tensors: list[Tensor] = field(default_factory=list)
    nodes: list[Node] = field(default_factory=list)
    tensor_unions: list[TensorUnion] = field(default_factory=list)
    output_sink: GraphIONode | None = None

    def find_tensor(self, name: str) -> Tensor | None:
        return next((t for t in self.tensors if t.name == name), None)

    def assign_unions(self, grouping: dict[str, int]) -> None:
        """Build the union list from a precomputed tensor -> group mapping.

        Group ids must be contiguous from 0. Negative ids leave a tensor
        standalone. Members are collected in tensor list order.

        :param grouping: Mapping of tensor name to union group id
        :raises ValueError: If the mapping names an unknown tensor, a tensor
            that can not share storage, or has gaps in its group ids
        """
        by_name = {t.name: t for t in self.tensors}
        for name, union_no in grouping.items():
            tensor = by_name.get(name)
            if tensor is None:
                raise ValueError(f"Union assignment names unknown tensor: {name}")
            if union_no >= 0 and (tensor.is_io or tensor.initialize):
                raise ValueError(f"Tensor {name} can not share storage with other tensors")

        group_ids = sorted({g for g in grouping.values() if g >= 0})
        if group_ids != list(range(len(group_ids))):
            raise ValueError(f"Union group ids must be contiguous from 0, got {group_ids}")

        self.tensor_unions = [TensorUnion(index=g) for g in group_ids]
        for tensor in self.tensors:
            tensor.union_no = grouping.get(tensor.name, -1)
            if tensor.union_no >= 0:
                self.tensor_unions[tensor.union_no].tensors.append(tensor)
