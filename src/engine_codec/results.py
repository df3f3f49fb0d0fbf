"""`submit` result decoding across the three historical encodings.

The encodings carry no common format tag. They are told apart by structure:

* ``SubmitResultV2`` starts with the version byte ``7``.
* ``SubmitResultV1`` starts with a ``TransactionStatus`` discriminant (0-5).
* ``LegacyExecutionResult`` starts with a boolean status byte.

Any buffer starting with ``7`` is therefore V2. Otherwise V1 is tried first and
the legacy layout is the last resort. A new shape must not be added to this
chain unless its first byte stays disjoint from all three.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .config import SUBMIT_RESULT_V2_VERSION
from .serializer import try_deserialize
from .types import (
    SCHEMA,
    CallTooDeep,
    LegacyExecutionResult,
    OutOfFund,
    OutOfGas,
    OutOfOffset,
    RevertStatus,
    SubmitResultV1,
    SubmitResultV2,
    SuccessStatus,
    TransactionStatus,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LegacyStatusFalse:
    """Legacy result whose boolean status byte was false."""


ExecutionError = Union[RevertStatus, OutOfGas, OutOfFund, OutOfOffset, CallTooDeep, LegacyStatusFalse]

SubmitResultKind = Union[SubmitResultV2, SubmitResultV1, LegacyExecutionResult]


class ExecutionOutcome:
    """Success output or execution error of a decoded `submit` result."""

    def __init__(self, ok: bool, output: Optional[bytes] = None, error: Optional[ExecutionError] = None):
        self.ok = ok
        self.output = output
        self.error = error

    @classmethod
    def success(cls, output: bytes) -> "ExecutionOutcome":
        return cls(True, bytes(output), None)

    @classmethod
    def failure(cls, error: ExecutionError) -> "ExecutionOutcome":
        return cls(False, None, error)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExecutionOutcome):
            return NotImplemented
        return (self.ok, self.output, self.error) == (other.ok, other.output, other.error)

    def __repr__(self) -> str:
        if self.ok:
            return f"ExecutionOutcome.success({self.output!r})"
        return f"ExecutionOutcome.failure({self.error!r})"


def status_outcome(status: TransactionStatus) -> ExecutionOutcome:
    if isinstance(status, SuccessStatus):
        return ExecutionOutcome.success(status.output)
    if isinstance(status, (RevertStatus, OutOfGas, OutOfFund, OutOfOffset, CallTooDeep)):
        return ExecutionOutcome.failure(status)
    # Decoding always yields a variant; anything else maps like a false legacy status.
    return ExecutionOutcome.failure(LegacyStatusFalse())


@dataclass(frozen=True)
class SubmitResult:
    """Wrapper over whichever `submit` result shape was decoded."""

    result: SubmitResultKind

    @property
    def gas_used(self) -> int:
        return self.result.gas_used

    @property
    def logs(self) -> list:
        return self.result.logs

    def output(self) -> ExecutionOutcome:
        result = self.result
        if isinstance(result, (SubmitResultV2, SubmitResultV1)):
            return status_outcome(result.status)
        if isinstance(result, LegacyExecutionResult):
            if result.succeeded:
                return ExecutionOutcome.success(result.output)
            return ExecutionOutcome.failure(LegacyStatusFalse())
        raise TypeError(f"unsupported submit result {type(result).__name__}")

    def encode(self) -> bytes:
        return self.result.encode()

    @classmethod
    def decode(cls, data: bytes) -> "SubmitResult":
        return decode_submit_result(data)


def decode_submit_result(data: bytes) -> SubmitResult:
    """Decode a `submit` response of any supported version.

    Raises ``CodecError`` when the buffer is a malformed V2 result or when it
    fails both the V1 and legacy layouts (the legacy error is reported).
    """
    data = bytes(data)
    if data[:1] == bytes([SUBMIT_RESULT_V2_VERSION]):
        result = SubmitResult(SubmitResultV2.decode(data))
        logger.debug("decoded SubmitResultV2 (%d bytes)", len(data))
        return result

    attempt = try_deserialize(SCHEMA, SubmitResultV1, data)
    if attempt.ok:
        logger.debug("decoded SubmitResultV1 (%d bytes)", len(data))
        return SubmitResult(attempt.value)

    logger.debug("not a SubmitResultV1 (%s); trying legacy layout", attempt.error)
    result = SubmitResult(LegacyExecutionResult.decode(data))
    logger.debug("decoded LegacyExecutionResult (%d bytes)", len(data))
    return result
