"""
Response merger tests: every observed flow response shape must come back
carrying the input that produced it.
"""
import pytest

from conftest import make_part, part_payload
from pricing_gateway.engine.response_merger import (
    is_plain_record,
    merge_input_with_payload,
    pair_inputs_with_responses,
)


@pytest.mark.parametrize("value, expected", [
    ({}, True),
    ({"a": 1}, True),
    ([], False),
    ([{"a": 1}], False),
    (None, False),
    (3, False),
    ("text", False),
])
def test_is_plain_record(value, expected):
    assert is_plain_record(value) is expected


class TestMergeInputWithPayload:
    def test_record_gets_input_attached(self):
        part = make_part()
        merged = merge_input_with_payload(part, {"finalPrice": 120})
        assert merged == {"finalPrice": 120, "input": part_payload()}

    def test_existing_input_field_is_overwritten(self):
        part = make_part()
        merged = merge_input_with_payload(part, {"input": "echo", "price": 1})
        assert merged["input"] == part_payload()

    def test_single_record_list_collapses_to_record(self):
        part = make_part()
        merged = merge_input_with_payload(part, [{"finalPrice": 120}])
        assert merged == {"finalPrice": 120, "input": part_payload()}

    def test_single_scalar_list_does_not_collapse(self):
        part = make_part()
        merged = merge_input_with_payload(part, [7])
        assert merged == [{"input": part_payload(), "value": 7}]

    def test_single_nested_list_does_not_collapse(self):
        part = make_part()
        merged = merge_input_with_payload(part, [[1, 2]])
        assert merged == [{"input": part_payload(), "value": [1, 2]}]

    def test_multi_element_list_merges_each_element(self):
        part = make_part()
        merged = merge_input_with_payload(part, [{"a": 1}, 2, None])
        assert merged == [
            {"a": 1, "input": part_payload()},
            {"input": part_payload(), "value": 2},
            {"input": part_payload(), "value": None},
        ]

    def test_scalar_is_boxed(self):
        part = make_part()
        assert merge_input_with_payload(part, 42) == {"input": part_payload(), "value": 42}

    def test_null_payload_is_boxed(self):
        part = make_part()
        assert merge_input_with_payload(part, None) == {"input": part_payload(), "value": None}

    def test_missing_input_is_null(self):
        assert merge_input_with_payload(None, {"a": 1}) == {"a": 1, "input": None}

    def test_payload_is_not_mutated(self):
        payload = {"finalPrice": 1}
        merge_input_with_payload(make_part(), payload)
        assert payload == {"finalPrice": 1}


@pytest.mark.parametrize("raw", [
    {"finalPrice": 110},
    [{"finalPrice": 110}],
    110,
    "ok",
])
def test_single_part_always_carries_its_input(raw):
    """Object, one-element list of object and scalar all yield the exact input."""
    part = make_part(extra={"nested": [1, 2]})
    merged = merge_input_with_payload(part, raw)
    assert isinstance(merged, dict)
    assert merged["input"] == part_payload(extra={"nested": [1, 2]})


class TestPairInputsWithResponses:
    def test_list_pairs_by_index(self):
        parts = [make_part(basePrice=1), make_part(basePrice=2), make_part(basePrice=3)]
        responses = [{"id": "a"}, {"id": "b"}, {"id": "c"}]

        merged = pair_inputs_with_responses(parts, responses)

        assert len(merged) == 3
        for index, item in enumerate(merged):
            assert item["id"] == "abc"[index]
            assert item["input"]["basePrice"] == index + 1

    def test_multi_part_list_never_collapses(self):
        parts = [make_part(basePrice=1), make_part(basePrice=2)]
        merged = pair_inputs_with_responses(parts, [{"id": "a"}, {"id": "b"}])
        assert isinstance(merged, list)
        assert [m["input"]["basePrice"] for m in merged] == [1, 2]

    def test_per_part_singleton_lists_collapse_per_part(self):
        parts = [make_part(basePrice=1), make_part(basePrice=2)]
        merged = pair_inputs_with_responses(parts, [[{"id": "a"}], [{"id": "b"}]])
        assert merged == [
            {"id": "a", "input": part_payload(basePrice=1)},
            {"id": "b", "input": part_payload(basePrice=2)},
        ]

    def test_scalar_elements_are_boxed(self):
        parts = [make_part(basePrice=1), make_part(basePrice=2)]
        merged = pair_inputs_with_responses(parts, [10, 20])
        assert merged == [
            {"input": part_payload(basePrice=1), "value": 10},
            {"input": part_payload(basePrice=2), "value": 20},
        ]

    def test_extra_responses_get_null_input(self):
        parts = [make_part()]
        merged = pair_inputs_with_responses(parts, [{"a": 1}, {"b": 2}])
        assert merged[1] == {"b": 2, "input": None}

    def test_shared_record_is_merged_with_every_part(self):
        parts = [make_part(basePrice=1), make_part(basePrice=2)]
        merged = pair_inputs_with_responses(parts, {"total": 3})
        assert merged == [
            {"total": 3, "input": part_payload(basePrice=1)},
            {"total": 3, "input": part_payload(basePrice=2)},
        ]

    def test_shared_scalar_is_boxed_for_every_part(self):
        parts = [make_part(basePrice=1), make_part(basePrice=2)]
        merged = pair_inputs_with_responses(parts, "done")
        assert [m["value"] for m in merged] == ["done", "done"]

    def test_empty_batch(self):
        assert pair_inputs_with_responses([], []) == []
        assert pair_inputs_with_responses([], {"a": 1}) == []
