"""
Capability-Tagged Operations
============================

An operation is a callable ``op(circuit, *args)`` that appends gates to a
Qiskit ``QuantumCircuit``. Each operation carries a capability tag fixed at
construction:

- ADJOINT: ``op.adjoint`` runs the inverse with the same arguments
- CONTROLLED: ``op.controlled(circuit, controls, *args)`` runs the
  operation conditioned on every qubit in ``controls``

Adjoint and controlled forms are never derived implicitly. Each operation
either supplies the bodies explicitly or is assembled with ``composite``,
which builds them from its steps:

    adjoint(A; B; C)    = C†; B†; A†
    controlled(A; B; C) = c-A; c-B; c-C

Capabilities of a composite are the intersection of its steps'
capabilities.

Author: qcanon Development Team
Date: October 2026
"""

import enum
from functools import reduce
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from qcanon.core.errors import CapabilityError

Body = Callable[..., None]
Step = Tuple["Operation", tuple]


class Capability(enum.Flag):
    """Declared ability of an operation to run inverted and/or controlled."""
    NONE = 0
    ADJOINT = 1
    CONTROLLED = 2
    ADJOINT_CONTROLLED = 3


def _describe(capabilities: Capability) -> str:
    if capabilities == Capability.NONE:
        return "NONE"
    names = [c.name for c in (Capability.ADJOINT, Capability.CONTROLLED) if c in capabilities]
    return "|".join(names)


def _merge_controls(body: Body) -> Body:
    # Controlling an already-controlled body adds to its control list.
    def merged(circuit, outer_controls, controls, *args):
        body(circuit, list(outer_controls) + list(controls), *args)
    return merged


class Operation:
    """
    Immutable, capability-tagged unit of computation over a register.

    Parameters
    ----------
    body : callable
        ``body(circuit, *args)``; appends the operation to ``circuit``.
    adjoint_body : callable, optional
        ``adjoint_body(circuit, *args)``; appends the inverse.
    controlled_body : callable, optional
        ``controlled_body(circuit, controls, *args)``.
    controlled_adjoint_body : callable, optional
        ``controlled_adjoint_body(circuit, controls, *args)``. Required
        whenever both ``adjoint_body`` and ``controlled_body`` are given.
    name : str, optional
        Label used in ``repr`` and log messages.
    """

    __slots__ = ("_body", "_adjoint_body", "_controlled_body", "_controlled_adjoint_body", "name")

    def __init__(
        self,
        body: Body,
        adjoint_body: Optional[Body] = None,
        controlled_body: Optional[Body] = None,
        controlled_adjoint_body: Optional[Body] = None,
        name: Optional[str] = None,
    ):
        if adjoint_body is not None and controlled_body is not None and controlled_adjoint_body is None:
            raise CapabilityError(
                "an operation supporting both adjoint and controlled forms needs a controlled-adjoint body"
            )
        if controlled_adjoint_body is not None and (adjoint_body is None or controlled_body is None):
            raise CapabilityError(
                "a controlled-adjoint body requires both adjoint and controlled bodies"
            )
        self._body = body
        self._adjoint_body = adjoint_body
        self._controlled_body = controlled_body
        self._controlled_adjoint_body = controlled_adjoint_body
        self.name = name or getattr(body, "__name__", "operation")

    @property
    def capabilities(self) -> Capability:
        capabilities = Capability.NONE
        if self._adjoint_body is not None:
            capabilities |= Capability.ADJOINT
        if self._controlled_body is not None:
            capabilities |= Capability.CONTROLLED
        return capabilities

    def supports(self, capability: Capability) -> bool:
        return (self.capabilities & capability) == capability

    def require(self, capability: Capability, context: Optional[str] = None) -> "Operation":
        """Return ``self``, or raise ``CapabilityError`` if ``capability`` is missing."""
        if not self.supports(capability):
            where = f" for {context}" if context else ""
            raise CapabilityError(
                f"{self.name} supports {_describe(self.capabilities)}, "
                f"but {_describe(capability)} is required{where}"
            )
        return self

    def narrow(self, capabilities: Capability) -> "Operation":
        """Return a copy that only exposes ``capabilities``."""
        self.require(capabilities, "narrowing")
        adjoint = Capability.ADJOINT in capabilities
        controlled = Capability.CONTROLLED in capabilities
        return type(self)(
            self._body,
            self._adjoint_body if adjoint else None,
            self._controlled_body if controlled else None,
            self._controlled_adjoint_body if adjoint and controlled else None,
            name=self.name,
        )

    def __call__(self, circuit, *args) -> None:
        self._body(circuit, *args)

    @property
    def adjoint(self) -> "Operation":
        self.require(Capability.ADJOINT, "adjoint")
        if self.name.startswith("Adjoint "):
            name = self.name[len("Adjoint "):]
        else:
            name = f"Adjoint {self.name}"
        return type(self)(
            self._adjoint_body,
            self._body,
            self._controlled_adjoint_body,
            self._controlled_body,
            name=name,
        )

    @property
    def controlled(self) -> "Operation":
        self.require(Capability.CONTROLLED, "controlled")
        controlled_adjoint = self._controlled_adjoint_body
        # The controlled form takes an extra ``controls`` argument, so it is a
        # plain Operation rather than an instance of the (oracle) subclass.
        return Operation(
            self._controlled_body,
            controlled_adjoint,
            _merge_controls(self._controlled_body),
            _merge_controls(controlled_adjoint) if controlled_adjoint is not None else None,
            name=f"Controlled {self.name}",
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} [{_describe(self.capabilities)}]>"


def common_capabilities(*operations: Operation) -> Capability:
    """Intersection of the capabilities of ``operations`` (everything if empty)."""
    return reduce(
        lambda acc, op: acc & op.capabilities,
        operations,
        Capability.ADJOINT_CONTROLLED,
    )


def composite(
    steps: Callable[..., Iterable[Step]],
    operations: Sequence[Operation],
    capabilities: Optional[Capability] = None,
    name: str = "composite",
    cls: type = Operation,
) -> Operation:
    """
    Build a fixed-order sequence of operations sharing one call signature.

    Parameters
    ----------
    steps : callable
        ``steps(*args)`` returns the ordered ``(operation, op_args)`` pairs
        for one call. It runs before any gate is appended, so argument
        validation placed there fails without touching the circuit.
    operations : sequence of Operation
        Every operation ``steps`` may produce; their capability
        intersection bounds the composite's capabilities.
    capabilities : Capability, optional
        Narrower capability set to expose. Defaults to the intersection.
    name : str
        Label for the composite.
    cls : type
        Operation subclass to instantiate (e.g. an oracle type).

    Returns
    -------
    Operation
        Sequence whose adjoint runs the reversed adjoints and whose
        controlled form controls every step.
    """
    available = common_capabilities(*operations)
    if capabilities is None:
        capabilities = available
    elif (capabilities & available) != capabilities:
        raise CapabilityError(
            f"{name} requests {_describe(capabilities)} "
            f"but its steps only support {_describe(available)}"
        )

    def plan(args) -> List[Step]:
        return list(steps(*args))

    def body(circuit, *args):
        for op, op_args in plan(args):
            op(circuit, *op_args)

    adjoint_body = None
    controlled_body = None
    controlled_adjoint_body = None

    if Capability.ADJOINT in capabilities:
        def adjoint_body(circuit, *args):
            for op, op_args in reversed(plan(args)):
                op.adjoint(circuit, *op_args)

    if Capability.CONTROLLED in capabilities:
        def controlled_body(circuit, controls, *args):
            for op, op_args in plan(args):
                op.controlled(circuit, controls, *op_args)

    if capabilities == Capability.ADJOINT_CONTROLLED:
        def controlled_adjoint_body(circuit, controls, *args):
            for op, op_args in reversed(plan(args)):
                op.adjoint.controlled(circuit, controls, *op_args)

    return cls(body, adjoint_body, controlled_body, controlled_adjoint_body, name=name)


def partial(operation: Operation, *fixed) -> Operation:
    """
    Fix the leading arguments of ``operation``.

    ``partial(R1, theta)`` is the single-qubit operation ``(circuit, qubit)``
    applying ``R1(theta)``; adjoint and controlled forms keep the fixed
    arguments in place.
    """
    return composite(
        lambda *args: [(operation, fixed + args)],
        [operation],
        name=f"{operation.name}{fixed!r}",
    )
