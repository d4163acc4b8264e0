"""Tree subpackage: the Node wrapper over decoded JSON values.

Re-exports the public API for the tree module:
- Node: immutable wrapper around one position of a decoded JSON tree
- Shape: StrEnum of the three node kinds (OBJECT, ARRAY, SCALAR)
- classify: raw decoded value -> Shape
"""

from json_navigator.tree.nodes import Location, Node, Shape, classify

__all__ = ["Location", "Node", "Shape", "classify"]
