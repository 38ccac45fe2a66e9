"""Standard includes, helper macros and target specific directives."""

__docformat__ = "restructuredtext"
__all__ = ["render_preamble"]

from typing import TextIO

from onnxc.generate._templates import AVR_PREAMBLE, PREAMBLE
from onnxc.options import EmitOptions


def render_preamble(stream: TextIO, options: EmitOptions) -> None:
    """Write includes and macros needed by the generated functions.

    :param stream: Output stream
    :param options: Target options; AVR targets get program memory access
    """
    stream.write(PREAMBLE)
    if options.target_avr:
        stream.write(AVR_PREAMBLE)
