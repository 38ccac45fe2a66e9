"""Tests for the public entry function."""

import io

import numpy as np
import pytest

from onnxc.build import Graph, GraphIONode, Tensor
from onnxc.errors import InternalError
from onnxc.generate import render_entry

SIGNATURE = "void entry(const float tensor_a[1][4], float tensor_c[1][4])"


def _entry(graph: Graph, define: bool) -> str:
    stream = io.StringIO()
    render_entry(graph, stream, define)
    return stream.getvalue()


class TestEntrySignature:
    """Test the parameter list built from graph inputs and outputs."""

    def test_declaration(self, entry_graph):
        assert _entry(entry_graph, define=False) == SIGNATURE + ";\n"

    def test_definition(self, entry_graph):
        assert _entry(entry_graph, define=True) == (
            SIGNATURE + "\n{\n\tnode_relu(tensor_a, tensor_c);\n}\n"
        )

    def test_non_io_input_is_omitted(self, entry_graph):
        assert "tensor_b" not in _entry(entry_graph, define=True)

    def test_unknown_input_is_omitted(self, make_io_model, entry_graph):
        entry_graph.model = make_io_model(["missing", "a"], ["c"])
        assert _entry(entry_graph, define=False) == SIGNATURE + ";\n"

    def test_signature_identical_in_both_modes(self, entry_graph):
        declaration = _entry(entry_graph, define=False)
        definition = _entry(entry_graph, define=True)
        assert declaration[: -len(";\n")] == definition[: len(SIGNATURE)]

    def test_missing_output_sink_is_fatal(self, entry_graph):
        entry_graph.output_sink = None
        with pytest.raises(InternalError, match="no graph_output node"):
            _entry(entry_graph, define=False)

    def test_no_inputs(self, make_io_model):
        y = Tensor("y", [2], generate=False, is_io=True)
        sink = GraphIONode("graph_output", [y])
        graph = Graph(model=make_io_model([], ["y"]), tensors=[y], nodes=[sink], output_sink=sink)
        assert _entry(graph, define=True) == "void entry(float tensor_y[2])\n{\n}\n"


class TestConstantOutput:
    """Test graphs whose output is a compile-time constant."""

    @pytest.fixture
    def constant_output_graph(self, entry_graph):
        k = Tensor(
            "k",
            [1, 4],
            initialize=True,
            is_const=True,
            data=np.ones((1, 4), dtype=np.float32),
        )
        entry_graph.tensors.append(k)
        entry_graph.output_sink.inputs.append(k)
        return entry_graph, k

    def test_const_flag_is_cleared(self, constant_output_graph):
        graph, k = constant_output_graph
        output = _entry(graph, define=False)
        assert not k.is_const
        assert output == (
            "void entry(const float tensor_a[1][4], float tensor_c[1][4], float tensor_k[1][4]);\n"
        )

    def test_clearing_is_idempotent(self, constant_output_graph):
        graph, _ = constant_output_graph
        assert _entry(graph, define=False) == _entry(graph, define=False)
