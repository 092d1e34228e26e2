from .partition import typed_equitable_partition, color_classes
from .canonical import (
    CanonicalSignature,
    canonical_form,
    canonical_signature,
    cell_matrix,
    signature_cells,
    signature_edges,
    signature_node_types,
    signature_size,
)
from .automorphisms import typed_automorphism_count

__all__ = [
    "typed_equitable_partition",
    "color_classes",
    "CanonicalSignature",
    "canonical_form",
    "canonical_signature",
    "cell_matrix",
    "signature_cells",
    "signature_edges",
    "signature_node_types",
    "signature_size",
    "typed_automorphism_count",
]
