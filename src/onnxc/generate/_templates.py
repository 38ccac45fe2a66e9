"""Code templates and constants for C code generation.

This module provides the fixed text blocks written into every generated
file, and the naming constants shared by the emitters.
"""

__docformat__ = "restructuredtext"
__all__ = [
    "AVR_PREAMBLE",
    "ENTRY_FUNCTION_NAME",
    "FRONTMATTER_TEMPLATE",
    "FUNCTION_COMMENT_TEMPLATE",
    "HEADER_INCLUDES",
    "INDENT",
    "INITIALIZER_INDENT",
    "PREAMBLE",
]

INDENT = "\t"
INITIALIZER_INDENT = "  "
ENTRY_FUNCTION_NAME = "entry"

FRONTMATTER_TEMPLATE = """\
// This file is computer-generated by onnxc {onnxc_version}

// ONNX model:
// produced by {producer_name}, version {producer_version}
// ONNX IR version: {ir_version}
// Model documentation:
/*
{doc_string}
*/
"""

# 'inline' functions are a C99 addition
PREAMBLE = """\
#include <float.h>
#include <math.h>
#include <stdbool.h>
#include <stdint.h>
#include <string.h>

#define MAX(X,Y) ( (X) > (Y) ? (X) : (Y) )
#define MIN(X,Y) ( (X) < (Y) ? (X) : (Y) )
#define CLIP(X,L) ( MAX(MIN(X,L), -(L)) )

#if __STDC_VERSION__ < 199901L
#define FUNC_PREFIX
#else
#define FUNC_PREFIX static inline
#endif
"""

AVR_PREAMBLE = """\
#include <avr/pgmspace.h>
#define RD_PROGMEM(x) pgm_read_byte(&(x))
"""

HEADER_INCLUDES = """\
#include <stdbool.h>
#include <stdint.h>
"""

FUNCTION_COMMENT_TEMPLATE = """\
/*
 * Operand:           {op_name}
 * Name in ONNX file: {onnx_name}
 */
"""
