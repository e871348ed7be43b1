"""Pattern Catalog - runnable demonstrations of classic design patterns.

Key Components:
    - domain: descriptors, outputs and the exception hierarchy
    - patterns: the Builder, Delegation and Dependency Injection examples
    - application: the catalog registry and the example runner
    - config / infrastructure: configuration and structured logging
    - cli: command line host

Usage:
    >>> from pattern_catalog import ExampleRunner, build_default_catalog
    >>> catalog = build_default_catalog()
    >>> ExampleRunner(catalog).run_by_name("Builder", {"patties": 2}).value.patties
    2
"""

from ._version import __version__
from .application import ExampleRunner, PatternCatalog
from .bootstrap import build_default_catalog
from .domain.catalog import ExampleDescriptor, ExampleOutput, PatternCategory

__all__ = [
    "__version__",
    "ExampleDescriptor",
    "ExampleOutput",
    "ExampleRunner",
    "PatternCatalog",
    "PatternCategory",
    "build_default_catalog",
]
