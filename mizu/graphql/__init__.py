from .executor import GraphQLExecutor, OperationExecutor
from .operations import OperationSpec

__all__ = [
    "GraphQLExecutor",
    "OperationExecutor",
    "OperationSpec",
]
