"""
THEOLOGOS - Core Module

Foundational pieces shared by every other package:
- Unified error handling
- Type definitions

Usage:
    from core import CanonConfigError, CanonicalStoreError, ErrorSeverity
"""

from core.errors import (
    TheologosError,
    TheologosConfigError,
    CanonConfigError,
    CanonicalStoreError,
    ErrorContext,
    ErrorSeverity,
)
from core.types import (
    VerseIdentity,
    BookName,
    UnresolvedDescriptor,
    TestamentLiteral,
    CanonicalBookDict,
    ParsedReferenceDict,
    ResolvedReferenceDict,
    ResolutionResultDict,
    DetectionResultDict,
    ProofGroupDict,
)

__all__ = [
    # Errors
    "TheologosError",
    "TheologosConfigError",
    "CanonConfigError",
    "CanonicalStoreError",
    "ErrorContext",
    "ErrorSeverity",
    # Types
    "VerseIdentity",
    "BookName",
    "UnresolvedDescriptor",
    "TestamentLiteral",
    "CanonicalBookDict",
    "ParsedReferenceDict",
    "ResolvedReferenceDict",
    "ResolutionResultDict",
    "DetectionResultDict",
    "ProofGroupDict",
]
