"""Borsh-encoded engine call parameters and `submit` results.

Every class here is declared in ``SCHEMA`` (bottom of the module); field order
in the schema is wire order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .config import (
    FT_METADATA_DECIMALS,
    FT_METADATA_ICON,
    FT_METADATA_NAME,
    FT_METADATA_SPEC,
    FT_METADATA_SYMBOL,
    SUBMIT_RESULT_V2_VERSION,
    U256_SIZE,
)
from .errors import CodecError, ErrorCode
from .schema import SchemaRegistry
from .serializer import deserialize, serialize


class Borsh:
    """Encode/decode through the module schema."""

    def encode(self) -> bytes:
        return serialize(SCHEMA, self)

    @classmethod
    def decode(cls, data: bytes):
        return deserialize(SCHEMA, cls, data)


# --- Call arguments ---


@dataclass(frozen=True)
class BeginBlockArgs(Borsh):
    """Parameters for `begin_block`. Every field is a 32-byte big-endian word."""

    hash: bytes
    coinbase: bytes
    timestamp: bytes
    number: bytes
    difficulty: bytes
    gaslimit: bytes


@dataclass(frozen=True)
class BeginChainArgs(Borsh):
    chain_id: bytes


@dataclass(frozen=True)
class FunctionCallArgs(Borsh):
    contract: bytes
    input: bytes


@dataclass(frozen=True)
class GetChainID(Borsh):
    pass


@dataclass(frozen=True)
class GetStorageAtArgs(Borsh):
    address: bytes
    key: bytes


@dataclass(frozen=True)
class MetaCallArgs(Borsh):
    signature: bytes
    v: int
    nonce: bytes
    fee_amount: bytes
    fee_address: bytes
    contract_address: bytes
    value: bytes
    method_def: str
    args: bytes


@dataclass(frozen=True)
class NewCallArgs(Borsh):
    chain_id: bytes
    owner_id: str
    bridge_prover_id: str
    upgrade_delay_blocks: int


@dataclass(frozen=True)
class FungibleTokenMetadata(Borsh):
    """NEP-141 metadata (ETH on NEAR is a NEP-141 token)."""

    spec: str
    name: str
    symbol: str
    icon: Optional[str]
    reference: Optional[str]
    reference_hash: Optional[bytes]
    decimals: int

    @classmethod
    def default(cls) -> "FungibleTokenMetadata":
        return cls(
            spec=FT_METADATA_SPEC,
            name=FT_METADATA_NAME,
            symbol=FT_METADATA_SYMBOL,
            icon=FT_METADATA_ICON,
            reference=None,
            reference_hash=None,
            decimals=FT_METADATA_DECIMALS,
        )


@dataclass(frozen=True)
class InitCallArgs(Borsh):
    """Parameters for `new_eth_connector`."""

    prover_account: str
    eth_custodian_address: str
    metadata: FungibleTokenMetadata


@dataclass(frozen=True)
class ViewCallArgs(Borsh):
    sender: bytes
    address: bytes
    amount: bytes
    input: bytes


# --- Logs ---


@dataclass(frozen=True)
class RawU256(Borsh):
    value: bytes = bytes(U256_SIZE)

    def to_bytes(self) -> bytes:
        return bytes(self.value)

    def __str__(self) -> str:
        return "0x" + bytes(self.value).hex()


@dataclass(frozen=True)
class LogEvent(Borsh):
    topics: List[RawU256] = field(default_factory=list)
    data: bytes = b""


@dataclass(frozen=True)
class LogEventWithAddress(Borsh):
    address: bytes
    topics: List[RawU256] = field(default_factory=list)
    data: bytes = b""


# --- Execution status ---


class TransactionStatus(Borsh):
    """Closed union of execution statuses; each subclass is one variant.

    Statuses always travel as the enum (discriminant byte + variant fields),
    so ``encode``/``decode`` go through ``TransactionStatus`` even when called
    on a variant.
    """

    def encode(self) -> bytes:
        return serialize(SCHEMA, self, TransactionStatus)

    @classmethod
    def decode(cls, data: bytes) -> "TransactionStatus":
        return deserialize(SCHEMA, TransactionStatus, data)


@dataclass(frozen=True)
class SuccessStatus(TransactionStatus):
    output: bytes = b""


@dataclass(frozen=True)
class RevertStatus(TransactionStatus):
    output: bytes = b""


@dataclass(frozen=True)
class OutOfGas(TransactionStatus):
    pass


@dataclass(frozen=True)
class OutOfFund(TransactionStatus):
    pass


@dataclass(frozen=True)
class OutOfOffset(TransactionStatus):
    pass


@dataclass(frozen=True)
class CallTooDeep(TransactionStatus):
    pass


# --- `submit` results, newest first ---


@dataclass(frozen=True)
class SubmitResultV2(Borsh):
    status: TransactionStatus
    gas_used: int
    logs: List[LogEventWithAddress] = field(default_factory=list)
    version: int = SUBMIT_RESULT_V2_VERSION

    def __post_init__(self) -> None:
        # The version byte is the V2 format tag.
        if self.version != SUBMIT_RESULT_V2_VERSION:
            raise CodecError(
                ErrorCode.INVALID_VERSION,
                f"SubmitResultV2 version must be {SUBMIT_RESULT_V2_VERSION}, got {self.version}",
            )


@dataclass(frozen=True)
class SubmitResultV1(Borsh):
    status: TransactionStatus
    gas_used: int
    logs: List[LogEvent] = field(default_factory=list)


@dataclass(frozen=True)
class LegacyExecutionResult(Borsh):
    status: int
    gas_used: int
    output: bytes = b""
    logs: List[LogEvent] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return bool(self.status)


SCHEMA = SchemaRegistry([
    (
        BeginBlockArgs,
        {
            "kind": "struct",
            "fields": [
                ["hash", [32]],
                ["coinbase", [32]],
                ["timestamp", [32]],
                ["number", [32]],
                ["difficulty", [32]],
                ["gaslimit", [32]],
            ],
        },
    ),
    (BeginChainArgs, {"kind": "struct", "fields": [["chain_id", [32]]]}),
    (
        FunctionCallArgs,
        {"kind": "struct", "fields": [["contract", [20]], ["input", ["u8"]]]},
    ),
    (GetChainID, {"kind": "struct", "fields": []}),
    (
        GetStorageAtArgs,
        {"kind": "struct", "fields": [["address", [20]], ["key", [32]]]},
    ),
    (
        MetaCallArgs,
        {
            "kind": "struct",
            "fields": [
                ["signature", [64]],
                ["v", "u8"],
                ["nonce", [32]],
                ["fee_amount", [32]],
                ["fee_address", [20]],
                ["contract_address", [20]],
                ["value", [32]],
                ["method_def", "string"],
                ["args", ["u8"]],
            ],
        },
    ),
    (
        NewCallArgs,
        {
            "kind": "struct",
            "fields": [
                ["chain_id", [32]],
                ["owner_id", "string"],
                ["bridge_prover_id", "string"],
                ["upgrade_delay_blocks", "u64"],
            ],
        },
    ),
    (
        FungibleTokenMetadata,
        {
            "kind": "struct",
            "fields": [
                ["spec", "string"],
                ["name", "string"],
                ["symbol", "string"],
                ["icon", {"kind": "option", "type": "string"}],
                ["reference", {"kind": "option", "type": "string"}],
                ["reference_hash", {"kind": "option", "type": [32]}],
                ["decimals", "u8"],
            ],
        },
    ),
    (
        InitCallArgs,
        {
            "kind": "struct",
            "fields": [
                ["prover_account", "string"],
                ["eth_custodian_address", "string"],
                ["metadata", FungibleTokenMetadata],
            ],
        },
    ),
    (
        ViewCallArgs,
        {
            "kind": "struct",
            "fields": [
                ["sender", [20]],
                ["address", [20]],
                ["amount", [32]],
                ["input", ["u8"]],
            ],
        },
    ),
    (RawU256, {"kind": "struct", "fields": [["value", [32]]]}),
    (
        LogEvent,
        {"kind": "struct", "fields": [["topics", [RawU256]], ["data", ["u8"]]]},
    ),
    (
        LogEventWithAddress,
        {
            "kind": "struct",
            "fields": [["address", [20]], ["topics", [RawU256]], ["data", ["u8"]]],
        },
    ),
    (
        TransactionStatus,
        {
            "kind": "enum",
            "values": [
                ["success", SuccessStatus],
                ["revert", RevertStatus],
                ["out_of_gas", OutOfGas],
                ["out_of_fund", OutOfFund],
                ["out_of_offset", OutOfOffset],
                ["call_too_deep", CallTooDeep],
            ],
        },
    ),
    (SuccessStatus, {"kind": "struct", "fields": [["output", ["u8"]]]}),
    (RevertStatus, {"kind": "struct", "fields": [["output", ["u8"]]]}),
    (OutOfGas, {"kind": "struct", "fields": []}),
    (OutOfFund, {"kind": "struct", "fields": []}),
    (OutOfOffset, {"kind": "struct", "fields": []}),
    (CallTooDeep, {"kind": "struct", "fields": []}),
    (
        SubmitResultV2,
        {
            "kind": "struct",
            "fields": [
                ["version", "u8"],
                ["status", TransactionStatus],
                ["gas_used", "u64"],
                ["logs", [LogEventWithAddress]],
            ],
        },
    ),
    (
        SubmitResultV1,
        {
            "kind": "struct",
            "fields": [
                ["status", TransactionStatus],
                ["gas_used", "u64"],
                ["logs", [LogEvent]],
            ],
        },
    ),
    (
        LegacyExecutionResult,
        {
            "kind": "struct",
            "fields": [
                ["status", "u8"],
                ["gas_used", "u64"],
                ["output", ["u8"]],
                ["logs", [LogEvent]],
            ],
        },
    ),
])
