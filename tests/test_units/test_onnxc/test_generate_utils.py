"""Tests for C literal formatting of constant tensor data."""

import numpy as np
import onnx
import pytest

from onnxc.build import Tensor
from onnxc.generate._utils import format_c_element, format_tensor_initializer

FLOAT = onnx.TensorProto.FLOAT
DOUBLE = onnx.TensorProto.DOUBLE


class TestFormatElement:
    """Test single element literals."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1.0, "1.0f"),
            (0.1, "0.1f"),
            (-2.5, "-2.5f"),
            (0.0, "0.0f"),
            (1.5e-7, "1.5e-07f"),
            (1e20, "1.0e+20f"),
        ],
    )
    def test_float(self, value, expected):
        assert format_c_element(np.float32(value), FLOAT) == expected

    def test_double_has_no_suffix(self):
        assert format_c_element(np.float64(0.1), DOUBLE) == "0.1"

    def test_non_finite(self):
        assert format_c_element(np.float32("inf"), FLOAT) == "INFINITY"
        assert format_c_element(np.float32("-inf"), FLOAT) == "-INFINITY"
        assert format_c_element(np.float32("nan"), FLOAT) == "NAN"

    def test_bool(self):
        assert format_c_element(np.bool_(True), onnx.TensorProto.BOOL) == "true"
        assert format_c_element(np.bool_(False), onnx.TensorProto.BOOL) == "false"

    def test_integers(self):
        assert format_c_element(np.int8(-128), onnx.TensorProto.INT8) == "-128"
        assert format_c_element(np.uint8(255), onnx.TensorProto.UINT8) == "255"

    def test_64_bit_integers_have_suffix(self):
        int64 = onnx.TensorProto.INT64
        assert format_c_element(np.int64(-1), int64) == "-1LL"
        assert format_c_element(np.int64(2**63 - 1), int64) == "9223372036854775807LL"
        uint64 = onnx.TensorProto.UINT64
        assert format_c_element(np.uint64(2**64 - 1), uint64) == "18446744073709551615ULL"

    def test_int64_minimum(self):
        """The minimum has no positive literal to negate."""
        value = np.iinfo(np.int64).min
        assert format_c_element(np.int64(value), onnx.TensorProto.INT64) == (
            "(-9223372036854775807LL - 1)"
        )


class TestFormatInitializer:
    """Test nested brace initializers."""

    def test_one_dimension(self):
        tensor = Tensor("v", [3], data=np.array([1, 2, 3], dtype=np.float32))
        assert format_tensor_initializer(tensor) == "{1.0f, 2.0f, 3.0f}"

    def test_three_dimensions(self):
        data = np.arange(8, dtype=np.int32).reshape(2, 2, 2)
        tensor = Tensor("t", [2, 2, 2], data_type=onnx.TensorProto.INT32, data=data)
        assert format_tensor_initializer(tensor) == (
            "{\n"
            "  {\n"
            "    {0, 1},\n"
            "    {2, 3}\n"
            "  },\n"
            "  {\n"
            "    {4, 5},\n"
            "    {6, 7}\n"
            "  }\n"
            "}"
        )

    def test_data_is_reshaped_to_declared_shape(self):
        """A scalar initializer is declared as a one element array."""
        tensor = Tensor("s", [1], data=np.array(3.0, dtype=np.float32))
        assert format_tensor_initializer(tensor) == "{3.0f}"
