"""
Shape Synthesis

Builders that carve canonical sub-topologies out of a working graph:

    LinearExtractor   - chains of fixed length
    StarSynthesizer   - single-level stars
    TreeSynthesizer   - multi-level fan-out trees

Star and tree builders share the ComponentMerger and the edge trimmer.
"""

from .trimmer import trim_legs
from .merger import ComponentMerger, DistanceTable, RoundResult, MergeOutcome
from .linear import LinearExtractor
from .star import StarSynthesizer
from .tree import TreeSynthesizer

__all__ = [
    "trim_legs",
    "ComponentMerger",
    "DistanceTable",
    "RoundResult",
    "MergeOutcome",
    "LinearExtractor",
    "StarSynthesizer",
    "TreeSynthesizer",
]
