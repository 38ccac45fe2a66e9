"""Pytest configuration and shared fixtures for onnxc tests."""

import onnx
import onnx.helper as onnx_helper
import pytest

from onnxc.build import NODE_CLASSES, Graph, GraphIONode, Tensor, register_node_class
from tests.test_units.test_onnxc.fixtures.nodes import TEST_NODE_CLASSES
from tests.test_units.test_onnxc.fixtures.synthetic_models import SyntheticONNXModels


@pytest.fixture(autouse=True)
def test_node_classes():
    """Register the test node classes, restoring the registry afterwards."""
    saved = dict(NODE_CLASSES)
    for op_type, node_class in TEST_NODE_CLASSES.items():
        register_node_class(op_type, node_class)
    yield TEST_NODE_CLASSES
    NODE_CLASSES.clear()
    NODE_CLASSES.update(saved)


# ===== Model File Fixtures =====


@pytest.fixture
def relu_model(tmp_path):
    """Create and save single Relu ONNX model."""
    model = SyntheticONNXModels.create_relu_model()
    path = tmp_path / "relu.onnx"
    onnx.save(model, str(path))
    return str(path)


@pytest.fixture
def add_relu_model(tmp_path):
    """Create and save Add + Relu ONNX model."""
    model = SyntheticONNXModels.create_add_relu_model()
    path = tmp_path / "add_relu.onnx"
    onnx.save(model, str(path))
    return str(path)


@pytest.fixture
def relu_chain_model(tmp_path):
    """Create and save Relu chain ONNX model."""
    model = SyntheticONNXModels.create_relu_chain_model()
    path = tmp_path / "relu_chain.onnx"
    onnx.save(model, str(path))
    return str(path)


@pytest.fixture
def constant_node_model(tmp_path):
    """Create and save ONNX model with a Constant node."""
    model = SyntheticONNXModels.create_constant_node_model()
    path = tmp_path / "constant_node.onnx"
    onnx.save(model, str(path))
    return str(path)


# ===== Hand-built Graph Fixtures =====


@pytest.fixture
def make_io_model():
    """Factory for an empty ONNX model declaring the given inputs/outputs."""

    def _make(input_names, output_names, shape=(1, 4)):
        inputs = [
            onnx_helper.make_tensor_value_info(n, onnx.TensorProto.FLOAT, shape)
            for n in input_names
        ]
        outputs = [
            onnx_helper.make_tensor_value_info(n, onnx.TensorProto.FLOAT, shape)
            for n in output_names
        ]
        graph = onnx_helper.make_graph([], "HandBuilt", inputs, outputs)
        return onnx_helper.make_model(graph, producer_name="onnxc-tests")

    return _make


@pytest.fixture
def entry_graph(make_io_model, test_node_classes):
    """Graph with inputs a (IO) and b (not IO) and one output c.

    Node order: relu(a) -> c, graph_output sink.
    """
    a = Tensor("a", [1, 4], generate=False, is_io=True)
    b = Tensor("b", [1, 4], generate=True)
    c = Tensor("c", [1, 4], generate=False, is_io=True)
    relu = test_node_classes["Relu"]("relu", [a], [c])
    sink = GraphIONode("graph_output", [c])
    return Graph(
        model=make_io_model(["a", "b"], ["c"]),
        tensors=[a, b, c],
        nodes=[relu, sink],
        output_sink=sink,
    )
