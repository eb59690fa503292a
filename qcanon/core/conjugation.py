"""
Conjugation Combinators
=======================

``with_(U, V)`` applies ``U; V; U†`` to a shared target. The four variants
differ only in the capabilities the result exposes:

=========  ====================  ===========================
variant    requires of V         result capabilities
=========  ====================  ===========================
with_      nothing               NONE
with_a     ADJOINT               ADJOINT
with_c     CONTROLLED            CONTROLLED
with_ca    ADJOINT, CONTROLLED   ADJOINT | CONTROLLED
=========  ====================  ===========================

U must always support ADJOINT.

The adjoint of a conjugation is ``U; V†; U†``, the conjugation of the
inverse. The controlled form is ``U; c-V; U†``: only the inner operation is
gated by the controls and the change of basis always runs. This equals the
fully controlled conjugation provided U does not act on the control qubits,
which is the caller's responsibility.

Author: qcanon Development Team
Date: October 2026
"""

from qcanon.core.operation import Capability, Operation


def _conjugation(outer: Operation, inner: Operation, capabilities: Capability, variant: str) -> Operation:
    outer.require(Capability.ADJOINT, f"the outer operation of {variant}")
    inner.require(capabilities, f"the inner operation of {variant}")

    outer_adjoint = outer.adjoint

    def body(circuit, *target):
        outer(circuit, *target)
        inner(circuit, *target)
        outer_adjoint(circuit, *target)

    adjoint_body = None
    controlled_body = None
    controlled_adjoint_body = None

    if Capability.ADJOINT in capabilities:
        inner_adjoint = inner.adjoint

        def adjoint_body(circuit, *target):
            outer(circuit, *target)
            inner_adjoint(circuit, *target)
            outer_adjoint(circuit, *target)

    if Capability.CONTROLLED in capabilities:
        controlled_inner = inner.controlled

        def controlled_body(circuit, controls, *target):
            outer(circuit, *target)
            controlled_inner(circuit, controls, *target)
            outer_adjoint(circuit, *target)

    if capabilities == Capability.ADJOINT_CONTROLLED:
        controlled_inner_adjoint = inner.adjoint.controlled

        def controlled_adjoint_body(circuit, controls, *target):
            outer(circuit, *target)
            controlled_inner_adjoint(circuit, controls, *target)
            outer_adjoint(circuit, *target)

    return Operation(
        body,
        adjoint_body,
        controlled_body,
        controlled_adjoint_body,
        name=f"{variant}({outer.name}, {inner.name})",
    )


def with_(outer: Operation, inner: Operation) -> Operation:
    """Conjugate ``inner`` by ``outer``; the result has no extra capability."""
    return _conjugation(outer, inner, Capability.NONE, "With")


def with_a(outer: Operation, inner: Operation) -> Operation:
    """Adjointable conjugation; ``inner`` must support ADJOINT."""
    return _conjugation(outer, inner, Capability.ADJOINT, "WithA")


def with_c(outer: Operation, inner: Operation) -> Operation:
    """Controllable conjugation; ``inner`` must support CONTROLLED."""
    return _conjugation(outer, inner, Capability.CONTROLLED, "WithC")


def with_ca(outer: Operation, inner: Operation) -> Operation:
    """Adjointable and controllable conjugation."""
    return _conjugation(outer, inner, Capability.ADJOINT_CONTROLLED, "WithCA")


def conjugate(outer: Operation, inner: Operation) -> Operation:
    """Conjugation exposing every capability ``inner`` supports."""
    return _conjugation(outer, inner, inner.capabilities, "Conjugate")
