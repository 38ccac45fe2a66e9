"""Minimal node classes used to exercise the emitter in tests.

Bodies operate on the flattened arrays; they are just enough to produce
compilable functions.
"""

from onnxc.build import Node


def _flat_loop(count: int, statement: str) -> str:
    return f"\tfor (uint32_t i = 0; i < {count}; i++)\n\t\t{statement}\n"


class IdentityNode(Node):
    op_name = "Identity"

    def generate_body(self) -> str:
        x, y = self.inputs[0], self.outputs[0]
        return f"\tmemcpy({y.cname}, {x.cname}, sizeof({y.c_type}) * {y.num_elements});\n"


class ReluNode(Node):
    op_name = "Relu"

    def generate_body(self) -> str:
        x, y = self.inputs[0], self.outputs[0]
        return (
            f"\tconst {x.c_type} *X = (const {x.c_type} *){x.cname};\n"
            f"\t{y.c_type} *Y = ({y.c_type} *){y.cname};\n"
            + _flat_loop(y.num_elements, "Y[i] = MAX(X[i], 0);")
        )


class AddNode(Node):
    op_name = "Add"

    def generate_body(self) -> str:
        a, b, c = self.inputs[0], self.inputs[1], self.outputs[0]
        return (
            f"\tconst {a.c_type} *A = (const {a.c_type} *){a.cname};\n"
            f"\tconst {b.c_type} *B = (const {b.c_type} *){b.cname};\n"
            f"\t{c.c_type} *C = ({c.c_type} *){c.cname};\n"
            + _flat_loop(c.num_elements, "C[i] = A[i] + B[i];")
        )


TEST_NODE_CLASSES = {
    "Identity": IdentityNode,
    "Relu": ReluNode,
    "Add": AddNode,
}
