"""Unit tests for batch result aggregation."""

from __future__ import annotations

from types import SimpleNamespace

from b24.client.models import BatchPayload, ListPayload
from b24.client.runtime.listing import (
    ScalarResult,
    SequenceResult,
    WrappedResult,
    classify_result,
    flatten_result,
    highest,
    merge_batch_into_list_payload,
)


class TestHighest:
    """Test highest() reduction."""

    def test_empty(self):
        assert highest([]) is None

    def test_all_absent(self):
        assert highest([None, None]) is None

    def test_single_value(self):
        assert highest([3]) == 3

    def test_ignores_absent(self):
        assert highest([3, None, 7]) == 7

    def test_mapping_values(self):
        """Test mappings are reduced over their values."""
        assert highest({"a": 5, "b": None, "c": 9}) == 9

    def test_empty_mapping(self):
        assert highest({}) is None

    def test_zero_is_a_value(self):
        """Test 0 counts as defined."""
        assert highest([None, 0]) == 0

    def test_generator(self):
        """Test any iterable is accepted."""
        assert highest(x for x in (1, None, 4, 2)) == 4


class TestClassifyResult:
    """Test per-command result shape classification."""

    def test_list_is_sequence(self):
        assert classify_result([1, 2]) == SequenceResult(entries=[1, 2])

    def test_tuple_is_sequence(self):
        assert classify_result((1,)) == SequenceResult(entries=[1])

    def test_items_mapping_is_wrapped(self):
        assert classify_result({"items": [1, 2]}) == WrappedResult(entries=[1, 2])

    def test_items_attribute_is_wrapped(self):
        """Test objects exposing an items list are unwrapped."""
        assert classify_result(SimpleNamespace(items=["x"])) == WrappedResult(entries=["x"])

    def test_plain_mapping_is_scalar(self):
        """Test a mapping without items is a single entry."""
        entry = {"ID": "1", "TITLE": "Deal"}
        assert classify_result(entry) == ScalarResult(entry=entry)

    def test_non_list_items_is_scalar(self):
        """Test an items value that is not a list falls back to scalar."""
        entry = {"items": "nope"}
        assert classify_result(entry) == ScalarResult(entry=entry)

    def test_string_is_scalar(self):
        assert classify_result("abc") == ScalarResult(entry="abc")

    def test_none_is_scalar(self):
        assert classify_result(None) == ScalarResult(entry=None)


class TestFlattenResult:
    def test_flatten_each_shape(self):
        assert flatten_result([1, 2]) == [1, 2]
        assert flatten_result({"items": [3]}) == [3]
        assert flatten_result(4) == [4]


class TestMergeBatchIntoListPayload:
    """Test merge_batch_into_list_payload()."""

    def test_heterogeneous_shapes_in_key_order(self):
        """Test array, items wrapper and scalar are flattened in order."""
        batch = BatchPayload(result={"k1": ["a", "b"], "k2": {"items": ["c"]}, "k3": "d"})

        payload = merge_batch_into_list_payload(batch)

        assert isinstance(payload, ListPayload)
        assert payload.result == ["a", "b", "c", "d"]

    def test_total_and_next(self):
        """Test total uses highest total and next stays absent."""
        batch = BatchPayload(
            result={"k1": [], "k2": []},
            result_total={"k1": 10, "k2": None},
            result_next={"k1": None, "k2": None},
        )

        payload = merge_batch_into_list_payload(batch)

        assert payload.total == 10
        assert payload.next is None

    def test_total_defaults_to_zero(self):
        payload = merge_batch_into_list_payload(BatchPayload(result={"k1": [1]}))
        assert payload.total == 0

    def test_next_is_highest(self):
        batch = BatchPayload(result_next={"k1": 50, "k2": 100, "k3": None})
        assert merge_batch_into_list_payload(batch).next == 100

    def test_errors_joined_with_empty_strings(self):
        """Test errors are newline-joined, empty ones included."""
        batch = BatchPayload(
            result={"k1": [1], "k2": [2], "k3": [3]},
            result_error={"k1": "first", "k2": "", "k3": "third"},
        )

        payload = merge_batch_into_list_payload(batch)

        assert payload.error == "first\n\nthird"
        # Entries of commands with errors are still merged
        assert payload.result == [1, 2, 3]

    def test_no_errors(self):
        assert merge_batch_into_list_payload(BatchPayload()).error == ""

    def test_time_carried_through(self):
        batch = BatchPayload(time={"start": 1.0, "duration": 0.5})
        assert merge_batch_into_list_payload(batch).time == {"start": 1.0, "duration": 0.5}

    def test_accepts_mapping(self):
        """Test a flat mapping is validated into a BatchPayload."""
        payload = merge_batch_into_list_payload(
            {"result": {"0": [1, 2], "1": [3]}, "result_total": {"0": 3}, "time": 1}
        )
        assert payload.result == [1, 2, 3]
        assert payload.total == 3
        assert payload.time == 1

    def test_per_command_order_preserved(self):
        """Test no cross-command sorting is applied."""
        batch = BatchPayload(result={"0": [{"ID": 9}, {"ID": 1}], "1": [{"ID": 5}]})
        ids = [entry["ID"] for entry in merge_batch_into_list_payload(batch).result]
        assert ids == [9, 1, 5]
