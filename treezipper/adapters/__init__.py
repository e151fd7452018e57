"""Capabilities for common Python tree shapes."""

from .nested_list import NestedListCapability
from .mapping import MappingCapability
from .labeled import LabeledTupleCapability

__all__ = [
    'NestedListCapability',
    'MappingCapability',
    'LabeledTupleCapability',
]
