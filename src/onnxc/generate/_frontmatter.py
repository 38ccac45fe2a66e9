"""Provenance header shared by generated source and header files."""

__docformat__ = "restructuredtext"
__all__ = ["render_frontmatter"]

from typing import TextIO

from onnx import ModelProto

from onnxc import __version__
from onnxc.generate._templates import FRONTMATTER_TEMPLATE


def render_frontmatter(model: ModelProto, stream: TextIO) -> None:
    """Write the provenance header of a generated file.

    The model docstring is written verbatim inside a block comment. A
    docstring containing a comment terminator corrupts the output.

    :param model: Source ONNX model
    :param stream: Output stream
    """
    stream.write(
        FRONTMATTER_TEMPLATE.format(
            onnxc_version=__version__,
            producer_name=model.producer_name,
            producer_version=model.producer_version,
            ir_version=model.ir_version,
            doc_string=model.doc_string,
        )
    )
