"""Stage 3: C Code Generation.

Emits freestanding C source and header files from a resolved graph.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "ENTRY_FUNCTION_NAME",
    "generate_c_header",
    "generate_c_source",
    "render_entry",
    "render_frontmatter",
    "render_functions",
    "render_globals",
    "render_preamble",
    "render_tensor",
    "write_c_header",
    "write_c_source",
]

from onnxc.generate._entry_gen import render_entry
from onnxc.generate._frontmatter import render_frontmatter
from onnxc.generate._function_gen import render_functions
from onnxc.generate._preamble import render_preamble
from onnxc.generate._templates import ENTRY_FUNCTION_NAME
from onnxc.generate._tensor_gen import render_globals, render_tensor
from onnxc.generate.code_generator import (
    generate_c_header,
    generate_c_source,
    write_c_header,
    write_c_source,
)
