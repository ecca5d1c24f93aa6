"""GraphQL execution error normalization.

graphql-core reports every resolver exception as a generic ``GraphQLError``
whose ``original_error`` holds the real cause, and reports variable
coercion problems as free-text errors attached to the variable definition.
``normalize`` runs once per request over that raw error list and rewrites
it into a stable client contract: a message, the original source
locations and an HTTP-style ``extensions.errorCode``.

Each raw error is classified once into a ``ClassifiedError`` tagged with a
``FaultKind``; expansion is a dispatch on that tag:

============== ======================================== ==========
Kind           Output                                   errorCode
============== ======================================== ==========
VALIDATION     one error per constraint violation       400
NOT_FOUND      one error with the fault message         404
UNPROCESSABLE  one error with the fault message         422
COERCION       ``Field <variable> has an invalid        400
               format.``
UNCLASSIFIED   the raw error, untouched                 (none)
============== ======================================== ==========

Faults are never mutated; every normalized error is a new object that
copies the raw error's locations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

import structlog
from graphql import GraphQLError
from graphql.language import VariableDefinitionNode

from shared.domain.faults import STATUS_CODES, DomainFault, FaultKind

logger = structlog.get_logger(__name__)

VARIABLE_START_MARKER = "Variable "
VARIABLE_END_MARKER = " has"
INVALID_VALUE_MARKER = " got invalid value "
INVALID_FORMAT_MESSAGE = "Field {name} has an invalid format."

_QUOTES = "'\"`"


# ---------------------------------------------------------------------------
# Output shape
# ---------------------------------------------------------------------------


class NormalizedError(GraphQLError):
    """Client-facing error derived from exactly one raw execution error.

    Subclasses ``GraphQLError`` so it travels through graphene-django's
    formatting unchanged; ``formatted`` renders ``message``, ``locations``,
    ``path`` and ``extensions.errorCode``.
    """

    def __init__(
        self,
        message: str,
        error_code: int,
        source_error: GraphQLError,
        original_error: Optional[Exception] = None,
    ) -> None:
        super().__init__(
            message,
            nodes=source_error.nodes,
            source=source_error.source,
            positions=source_error.positions,
            path=source_error.path,
            original_error=original_error,
            extensions={"errorCode": error_code},
        )
        self.locations = source_error.locations

    @property
    def error_code(self) -> int:
        return self.extensions["errorCode"]


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ClassifiedError:
    """A raw error tagged with the case that decides its normalization."""

    kind: FaultKind
    error: Any
    fault: Optional[DomainFault] = None
    variable_name: Optional[str] = None


def classify(error: Any) -> ClassifiedError:
    """Tag a raw execution error with its ``FaultKind``."""
    if not isinstance(error, GraphQLError):
        return ClassifiedError(FaultKind.UNCLASSIFIED, error)

    cause = error.original_error
    if isinstance(cause, DomainFault):
        kind = getattr(cause, "kind", FaultKind.UNCLASSIFIED)
        return ClassifiedError(kind, error, fault=cause)

    # Resolver failures always carry a path; coercion happens before execution.
    if error.path is None:
        name = coerced_variable_name(error)
        if name:
            return ClassifiedError(FaultKind.COERCION, error, variable_name=name)

    return ClassifiedError(FaultKind.UNCLASSIFIED, error)


def coerced_variable_name(error: GraphQLError) -> Optional[str]:
    """Return the variable an engine coercion error refers to, if any.

    The variable definition node attached by graphql-core is authoritative.
    Only when no such node exists is the name recovered from a
    ``Variable 'X' has ...`` message.
    """
    for node in error.nodes or ():
        if isinstance(node, VariableDefinitionNode):
            if INVALID_VALUE_MARKER in error.message:
                return node.variable.name.value
            return None
    return variable_name_from_message(error.message)


def variable_name_from_message(message: Optional[str]) -> Optional[str]:
    """Extract ``X`` from ``Variable 'X' has ...``; ``None`` if markers are absent."""
    if not message:
        return None
    start = message.find(VARIABLE_START_MARKER)
    if start == -1:
        return None
    start += len(VARIABLE_START_MARKER)
    end = message.find(VARIABLE_END_MARKER, start)
    if end == -1:
        return None
    name = message[start:end].strip().strip(_QUOTES).lstrip("$")
    return name or None


# ---------------------------------------------------------------------------
# Expansion
# ---------------------------------------------------------------------------


def _expand_validation(item: ClassifiedError) -> List[Any]:
    fault = item.fault
    code = STATUS_CODES[FaultKind.VALIDATION]
    violations = getattr(fault, "violations", ())
    if not violations:
        # Never drop a failure, even one that reports no violations.
        return [NormalizedError(str(fault) or item.error.message, code, item.error, fault)]
    return [
        NormalizedError(violation.message, code, item.error, fault)
        for violation in violations
    ]


def _expand_fault(item: ClassifiedError) -> List[Any]:
    fault = item.fault
    return [
        NormalizedError(
            str(fault) or item.error.message,
            STATUS_CODES[item.kind],
            item.error,
            fault,
        )
    ]


def _expand_coercion(item: ClassifiedError) -> List[Any]:
    if not item.variable_name:
        return [item.error]
    return [
        NormalizedError(
            INVALID_FORMAT_MESSAGE.format(name=item.variable_name),
            STATUS_CODES[FaultKind.COERCION],
            item.error,
        )
    ]


def _passthrough(item: ClassifiedError) -> List[Any]:
    return [item.error]


_EXPANDERS: Dict[FaultKind, Callable[[ClassifiedError], List[Any]]] = {
    FaultKind.VALIDATION: _expand_validation,
    FaultKind.NOT_FOUND: _expand_fault,
    FaultKind.UNPROCESSABLE: _expand_fault,
    FaultKind.COERCION: _expand_coercion,
    FaultKind.UNCLASSIFIED: _passthrough,
}


def normalize_error(error: Any) -> List[Any]:
    """Normalize one raw error; failures fall back to passing it through."""
    try:
        item = classify(error)
        logger.debug("graphql.error.classified", kind=str(item.kind))
        return _EXPANDERS.get(item.kind, _passthrough)(item)
    except Exception:
        logger.exception(
            "graphql.error.normalization_failed",
            error_type=type(error).__name__,
        )
        return [error]


def normalize(errors: Optional[Sequence[Any]]) -> List[Any]:
    """Flat-map the request's raw errors into normalized errors, in order."""
    if not errors:
        return []
    normalized: List[Any] = []
    for error in errors:
        normalized.extend(normalize_error(error))
    logger.info(
        "graphql.errors.normalized",
        raw_count=len(errors),
        normalized_count=len(normalized),
    )
    return normalized
