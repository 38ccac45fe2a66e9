"""Stage 2: Graph Builder.

Builds the resolved graph from a normalized ONNX model. Nodes keep the
model's order (ONNX graphs are topologically sorted); no reordering and no
lifetime analysis happens here. Union groups, if any, are supplied by the
caller as a precomputed mapping.
"""

__docformat__ = "restructuredtext"
__all__ = ["build_graph"]

from onnx import ModelProto, NodeProto, ValueInfoProto, helper

from onnxc.build._registry import get_node_class
from onnxc.build._utils import sanitize_c_identifier
from onnxc.build.types import GRAPH_OUTPUT_NAME, Graph, GraphIONode, Node, Tensor
from onnxc.normalize import (
    extract_onnx_opset_version,
    get_onnx_model_input_names,
    get_onnx_model_output_names,
    get_onnx_value_infos,
)


def _build_tensor(
    name: str,
    value_infos: dict[str, ValueInfoProto],
    is_io: bool,
) -> Tensor:
    """Build a non-constant tensor from its type information.

    :param name: ONNX tensor name
    :param value_infos: Type information of all described tensors
    :param is_io: Whether the tensor is a graph input or output
    :return: Tensor
    :raises ValueError: If the tensor's shape or type is unknown
    """
    value_info = value_infos.get(name)
    if value_info is None:
        raise ValueError(
            f"Tensor {name} has no static shape. Run shape inference or fix the model inputs."
        )
    return Tensor.from_value_info(value_info, is_io=is_io)


def _assign_function_names(nodes: list[Node]) -> None:
    """Give every computation node a C function name unique within the graph.

    Names that collide after sanitization get a numeric suffix
    (``node_conv_1``, ``node_conv_1_1``, ...), first come first served.

    :param nodes: Graph nodes in emission order
    """
    used: set[str] = set()
    for node in nodes:
        if node.is_meta:
            continue
        base = "node_" + sanitize_c_identifier(node.onnx_name)
        name = base
        suffix = 1
        while name in used:
            name = f"{base}_{suffix}"
            suffix += 1
        used.add(name)
        node.function_name = name


def _build_node(
    node: NodeProto,
    tensors: dict[str, Tensor],
    node_counter: int,
) -> Node:
    """Instantiate the registered node class for one ONNX node.

    :param node: ONNX node
    :param tensors: Tensors built so far, by ONNX name
    :param node_counter: Current node index (for name generation)
    :return: Node instance
    :raises NotImplementedError: If no node class is registered for the operator
    :raises ValueError: If the node reads a tensor that does not exist
    """
    node_class = get_node_class(node.op_type)
    if node_class is None:
        raise NotImplementedError(f"Unsupported ONNX operator: {node.op_type}")

    name = node.name if node.name else (node.output[0] if node.output else f"node_{node_counter}")

    def _lookup(tensor_name: str) -> Tensor | None:
        # Empty names mark omitted optional inputs/outputs
        if not tensor_name:
            return None
        if tensor_name not in tensors:
            raise ValueError(f"Node {name} ({node.op_type}) uses unknown tensor {tensor_name}")
        return tensors[tensor_name]

    attributes = {attr.name: helper.get_attribute_value(attr) for attr in node.attribute}

    return node_class(
        name,
        [_lookup(n) for n in node.input],
        [_lookup(n) for n in node.output],
        attributes,
    )


def build_graph(model: ModelProto, union_assignment: dict[str, int] | None = None) -> Graph:
    """Build the resolved graph from a normalized ONNX model.

    Tensor order: initializers, runtime graph inputs, then node outputs in
    node order. Initializers also listed as graph inputs are not IO tensors;
    they are compile-time initialized state. The ``graph_output`` meta-node
    is appended last and referenced as ``Graph.output_sink``.

    :param model: Normalized ONNX model (shape inference already applied)
    :param union_assignment: Optional precomputed tensor name -> union group id
    :return: Graph ready for emission
    """
    extract_onnx_opset_version(model)  # Rejects models without a primary opset

    value_infos = get_onnx_value_infos(model)
    output_names = get_onnx_model_output_names(model)

    graph = Graph(model=model)
    tensors: dict[str, Tensor] = {}

    def _add(tensor: Tensor) -> None:
        graph.tensors.append(tensor)
        tensors[tensor.name] = tensor

    for initializer in model.graph.initializer:
        _add(Tensor.from_initializer(initializer))

    for name in get_onnx_model_input_names(model):
        _add(_build_tensor(name, value_infos, is_io=True))

    for node in model.graph.node:
        for name in node.output:
            if name and name not in tensors:
                _add(_build_tensor(name, value_infos, is_io=name in output_names))

    for index, node in enumerate(model.graph.node):
        graph.nodes.append(_build_node(node, tensors, index))
    _assign_function_names(graph.nodes)

    missing = [name for name in output_names if name not in tensors]
    if missing:
        raise ValueError(f"Graph outputs are never produced: {missing}")

    sink = GraphIONode(GRAPH_OUTPUT_NAME, [tensors[name] for name in output_names])
    graph.nodes.append(sink)
    graph.output_sink = sink

    if union_assignment:
        graph.assign_unions(union_assignment)

    return graph
