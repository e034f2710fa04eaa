"""
THEOLOGOS - Scripture Reference Resolution

Turns scripture citations written in three grammars into canonical,
uniquely identified verses:

- traditional notation: "Romans 8:28-30; 1 Cor 13:4"
- machine codes: "Gen.3.6-Gen.3.8,Gen.3.13"
- free-form prose: "... as we see in Romans 8:28 ..."

Every grammar funnels into the one traditional-notation parser, so book
names are normalized in a single place.

Usage:
    from scripture import parse_references, ReferenceResolver, build_proof_groups

    result = ReferenceResolver(store).parse_and_resolve("Job 32:6-8")
    groups = build_proof_groups(sort_by_reading_position(result.resolved))
"""
from .canon import (
    CANON_SIZE,
    BIBLE_INDEX,
    BibleIndex,
    CanonicalBook,
    Testament,
    get_bible_index,
    lookup_by_name,
    normalize_book_name,
)
from .parser import (
    ParsedReference,
    TraditionalReferenceSource,
    format_reference,
    parse_reference,
    parse_references,
    parse_source,
)
from .detector import ProseReferences, detect_references
from .osis import (
    MachineCodeGroups,
    convert_machine_code_groups,
    machine_code_to_traditional,
    proofs_to_references,
)
from .resolver import (
    DetectionResult,
    ReferenceResolver,
    ResolutionResult,
    ResolvedReference,
    detect_and_resolve,
    parse_and_resolve,
    resolve_references,
)
from .grouping import ProofGroup, build_proof_groups, sort_by_reading_position

__all__ = [
    # Canon
    "CANON_SIZE",
    "BIBLE_INDEX",
    "BibleIndex",
    "CanonicalBook",
    "Testament",
    "get_bible_index",
    "lookup_by_name",
    "normalize_book_name",
    # Parsing
    "ParsedReference",
    "TraditionalReferenceSource",
    "format_reference",
    "parse_reference",
    "parse_references",
    "parse_source",
    # Sources
    "ProseReferences",
    "detect_references",
    "MachineCodeGroups",
    "convert_machine_code_groups",
    "machine_code_to_traditional",
    "proofs_to_references",
    # Resolution
    "DetectionResult",
    "ReferenceResolver",
    "ResolutionResult",
    "ResolvedReference",
    "detect_and_resolve",
    "parse_and_resolve",
    "resolve_references",
    # Display
    "ProofGroup",
    "build_proof_groups",
    "sort_by_reading_position",
]
