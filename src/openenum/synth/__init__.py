"""
Open enumeration synthesis.

- class_names: type name allocation within a namespace
- constant_names: constant name derivation for each literal
- synthesizer: orchestration into a generated OpenEnum subclass
"""

from .class_names import ClassNameAllocator, TypeSlot
from .constant_names import EMPTY_CONSTANT_NAME, ConstantNameGenerator, constant_name
from .synthesizer import EnumTypeSynthesizer, SynthesisState, synthesize

__all__ = [
    "ClassNameAllocator",
    "ConstantNameGenerator",
    "EMPTY_CONSTANT_NAME",
    "EnumTypeSynthesizer",
    "SynthesisState",
    "TypeSlot",
    "constant_name",
    "synthesize",
]
