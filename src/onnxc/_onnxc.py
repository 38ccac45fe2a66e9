__docformat__ = "restructuredtext"
__all__ = ["ONNXC"]

from pathlib import Path

import onnx

from onnxc.options import EmitOptions


class ONNXC:
    def __init__(
        self,
        verbose: bool = False,
        target_avr: bool = False,
        check_node_order: bool = True,
    ):
        self.verbose = verbose
        self.options = EmitOptions(target_avr=target_avr, check_node_order=check_node_order)

    def convert(
        self,
        onnx_path: str,
        target_c_path: str | None = None,
        target_h_path: str | None = None,
        union_assignment: dict[str, int] | None = None,
    ):
        """Convert ONNX model to a freestanding C source file.

        :param onnx_path: Path to input ONNX model
        :param target_c_path: Path to save generated C source
            (default: ``onnx_path`` with a ".c" suffix)
        :param target_h_path: Path to save a header declaring the entry
            function (default: no header is written)
        :param union_assignment: Precomputed tensor name -> union group id.
            Tensors in one group must never be live at the same time.
        """
        # Stage 1: Normalize ONNX model
        from onnxc.normalize import load_and_preprocess_onnx_model

        model = load_and_preprocess_onnx_model(onnx_path, infer_shapes=True, check_model=True)

        # Stage 2: Build graph
        from onnxc.build import build_graph

        graph = build_graph(model, union_assignment=union_assignment)

        # Stage 3: Generate C code
        from onnxc.generate import generate_c_header, generate_c_source

        source = generate_c_source(graph, self.options)

        if target_c_path is None:
            target_c_path = str(Path(onnx_path).with_suffix(".c"))
        Path(target_c_path).write_text(source)

        if target_h_path is not None:
            Path(target_h_path).write_text(generate_c_header(graph))

        if self.verbose:
            print(f"Generated: {target_c_path}")
            if target_h_path is not None:
                print(f"Generated: {target_h_path}")
            for union in graph.tensor_unions:
                print(
                    f"union {union.instance_name}: {len(union.tensors)} tensors, "
                    f"{union.size_bytes} bytes"
                )

    @staticmethod
    def preprocess(
        onnx_path: str,
        target_opset: int | None = None,
        infer_shapes: bool = True,
        clear_docstrings: bool = True,
    ) -> onnx.ModelProto:
        """Load and preprocess ONNX model.

        Preprocessing steps:
        1. Load model from file
        2. Validate with ONNX checker
        3. Convert to target opset version (if given)
        4. Run shape inference (if enabled)
        5. Fold Constant nodes into initializers
        6. Clear node docstrings (if enabled)

        :param onnx_path: Path to ONNX model
        :param target_opset: Target opset version (None = keep original)
        :param infer_shapes: Run ONNX shape inference (default: True)
        :param clear_docstrings: Clear node docstrings (default: True)
        :return: Preprocessed model
        """
        from onnxc.normalize import load_and_preprocess_onnx_model

        return load_and_preprocess_onnx_model(
            onnx_path,
            target_opset=target_opset,
            infer_shapes=infer_shapes,
            check_model=True,
            clear_docstrings=clear_docstrings,
        )
