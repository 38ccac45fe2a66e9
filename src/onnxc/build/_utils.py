"""Naming helpers shared by tensors and nodes."""

__docformat__ = "restructuredtext"
__all__ = ["sanitize_c_identifier"]


def sanitize_c_identifier(name: str) -> str:
    """Sanitize string to be a valid C identifier fragment.

    Replaces every character that is not an ASCII letter, digit or underscore
    with an underscore. Callers always add a prefix ("tensor_", "node_"), so
    leading digits and C keywords need no special handling.

    Examples:
        "conv1/out:0" -> "conv1_out_0"
        "1" -> "1"

    :param name: String to sanitize
    :return: Sanitized identifier fragment
    """
    if not name:
        return "_"

    return "".join(c if (c.isascii() and c.isalnum()) or c == "_" else "_" for c in name)
