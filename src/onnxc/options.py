"""Target configuration for C code emission.

Options are passed explicitly into the emission pipeline so that
independent compilations never share state.
"""

__docformat__ = "restructuredtext"
__all__ = ["EmitOptions"]

from dataclasses import dataclass


@dataclass(frozen=True)
class EmitOptions:
    """Options that change the shape of the generated C code.

    :param target_avr: Generate code for AVR microcontrollers. Adds the
        program-memory include and accessor macro, and places initialized
        const tensors in program memory.
    :param check_node_order: Verify that the node list is in dependency
        order before emitting anything.
    """

    target_avr: bool = False
    check_node_order: bool = True
