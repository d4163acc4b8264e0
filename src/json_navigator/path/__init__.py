"""Path subpackage: tokenizing and resolving dot-separated paths.

Re-exports the public API for the path module:
- KeyStep / IndexStep: the two kinds of path step
- tokenize: path string -> tuple of steps
- format_path: steps -> path string
- PathResolver: LRU-cached resolver; resolve / find use a shared instance
"""

from json_navigator.path.resolver import (
    PathResolver,
    find,
    get_resolver,
    resolve,
    resolve_steps,
)
from json_navigator.path.tokenizer import (
    IndexStep,
    KeyStep,
    Step,
    format_path,
    tokenize,
)

__all__ = [
    "IndexStep",
    "KeyStep",
    "PathResolver",
    "Step",
    "find",
    "format_path",
    "get_resolver",
    "resolve",
    "resolve_steps",
    "tokenize",
]
