"""Property tests for `submit` result disambiguation.

- Arbitrary bytes either decode or raise ``CodecError``, nothing else.
- Any buffer starting with the V2 tag is decoded as V2 or rejected, never
  reinterpreted as V1/legacy.
- Legacy results whose gas low word exceeds the buffer length can never be
  read as V1, so they always come back as legacy.
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from engine_codec.config import SUBMIT_RESULT_V2_VERSION, U64_MAX
from engine_codec.errors import CodecError
from engine_codec.results import decode_submit_result
from engine_codec.types import (
    CallTooDeep,
    LegacyExecutionResult,
    LogEvent,
    LogEventWithAddress,
    OutOfFund,
    OutOfGas,
    OutOfOffset,
    RawU256,
    RevertStatus,
    SubmitResultV1,
    SubmitResultV2,
    SuccessStatus,
)

_topics = st.lists(st.binary(min_size=32, max_size=32).map(RawU256), max_size=3)
_data = st.binary(max_size=32)

_logs = st.lists(st.builds(LogEvent, topics=_topics, data=_data), max_size=3)
_address_logs = st.lists(
    st.builds(LogEventWithAddress, address=st.binary(min_size=20, max_size=20), topics=_topics, data=_data),
    max_size=3,
)

_statuses = st.one_of(
    st.builds(SuccessStatus, output=_data),
    st.builds(RevertStatus, output=_data),
    st.just(OutOfGas()),
    st.just(OutOfFund()),
    st.just(OutOfOffset()),
    st.just(CallTooDeep()),
)


@settings(max_examples=300)
@given(st.binary(max_size=96))
def test_arbitrary_bytes_decode_or_raise_codec_error(data: bytes) -> None:
    try:
        decoded = decode_submit_result(data)
    except CodecError:
        return
    assert decoded.encode() == data


@settings(max_examples=200)
@given(st.binary(max_size=64))
def test_v2_tag_is_never_reinterpreted(tail: bytes) -> None:
    data = bytes([SUBMIT_RESULT_V2_VERSION]) + tail
    try:
        decoded = decode_submit_result(data)
    except CodecError:
        return
    assert isinstance(decoded.result, SubmitResultV2)


@given(st.builds(SubmitResultV2, status=_statuses, gas_used=st.integers(0, U64_MAX), logs=_address_logs))
def test_v2_roundtrip(result: SubmitResultV2) -> None:
    assert decode_submit_result(result.encode()).result == result


@given(st.builds(SubmitResultV1, status=_statuses, gas_used=st.integers(0, U64_MAX), logs=_logs))
def test_v1_roundtrip(result: SubmitResultV1) -> None:
    assert decode_submit_result(result.encode()).result == result


@given(
    status=st.integers(0, 1),
    gas_low=st.integers(0x1_0000, 0xFFFF_FFFF),
    gas_high=st.integers(0, 0xFFFF_FFFF),
    output=_data,
    logs=_logs,
)
def test_legacy_with_large_gas_low_word_is_legacy(
    status: int, gas_low: int, gas_high: int, output: bytes, logs: list
) -> None:
    result = LegacyExecutionResult(
        status=status, gas_used=(gas_high << 32) | gas_low, output=output, logs=logs
    )
    data = result.encode()
    # V1 would read gas_low as the status output length.
    assert gas_low > len(data)
    assert decode_submit_result(data).result == result
