"""Tree subpackage for value-to-tree conversion primitives.

Re-exports the public API for the tree module:
- ValueNode: dataclass representing a node in the normalized value tree
- ValueKind: StrEnum of the five node shapes (SCALAR, SEQUENCE, MAPPING, RECORD, REFERENCE)
- ValueBuilder: converts any Python value into a ValueNode tree
- is_zero: the recursive "default value for its shape" predicate
"""

from pretty_diff.tree.builder import ValueBuilder
from pretty_diff.tree.nodes import ValueKind, ValueNode, is_zero

__all__ = ["ValueBuilder", "ValueKind", "ValueNode", "is_zero"]
