"""Built-in pattern examples and their catalog descriptors."""
from typing import List

from pattern_catalog.domain.catalog.value_objects import ExampleDescriptor, PatternCategory

from .creational import builder
from .structural import delegation, injection


def builtin_descriptors() -> List[ExampleDescriptor]:
    """Descriptors for every built-in example, in catalog order."""
    return [
        ExampleDescriptor(
            name="Builder",
            category=PatternCategory.CREATIONAL,
            description="Assemble a hamburger step by step, then freeze it with build()",
            run=builder.run,
        ),
        ExampleDescriptor(
            name="Delegation",
            category=PatternCategory.STRUCTURAL,
            description="Forward calls to an optional, weakly referenced delegate",
            run=delegation.run,
        ),
        ExampleDescriptor(
            name="DependencyInjection",
            category=PatternCategory.STRUCTURAL,
            description="Supply a storage through the initializer, a property or a method call",
            run=injection.run,
        ),
    ]


__all__ = ["builtin_descriptors"]
