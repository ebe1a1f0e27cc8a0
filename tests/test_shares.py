"""Tests for share documents and base decoding."""

import json
import sys
import pytest
from polysecret.errors import InsufficientShares, InvalidEncoding
from polysecret.shares import (
    Share, ShareSet, SAMPLE_DOCUMENT,
    parse_base, decode_value, load_share_set, parse_share_set, select_points,
)


class TestDecoding:

    def test_bases(self):
        assert decode_value("111", 2) == 7
        assert decode_value("213", 4) == 39
        assert decode_value("ff", 16) == 255
        assert decode_value("zz", 36) == 35 * 36 + 35

    def test_case_insensitive(self):
        assert decode_value("FF", 16) == decode_value("fF", 16) == 255

    def test_sign(self):
        assert decode_value("-101", 2) == -5
        assert decode_value("+12", 10) == 12

    def test_big_value(self):
        digits = "9" * 200
        assert decode_value(digits, 10) == 10 ** 200 - 1

    def test_invalid_digits(self):
        for value, base in [("2", 2), ("19a", 10), ("g", 16), ("", 10), ("-", 10),
                            ("1_000", 10), (" 12", 10), ("0x1f", 16), ("1.5", 10)]:
            with pytest.raises(InvalidEncoding):
                decode_value(value, base)

    def test_value_must_be_string(self):
        with pytest.raises(InvalidEncoding):
            decode_value(12, 10)

    def test_parse_base(self):
        assert parse_base("10") == 10
        assert parse_base(16) == 16
        assert parse_base(" 2 ") == 2
        assert parse_base("36") == 36

    def test_parse_base_out_of_range(self):
        for bad in ["1", "37", 0, -10, "ten", "", True, 2.0, None]:
            with pytest.raises(InvalidEncoding):
                parse_base(bad)

    def test_share_decode(self):
        assert Share(2, 2, "111").decode() == (2, 7)


class TestLoading:

    def test_sample_document(self, sample_document):
        ss = load_share_set(sample_document)
        assert (ss.n, ss.k) == (4, 3)
        # index 6 lies above n and is never loaded
        assert sorted(ss.shares) == [1, 2, 3]
        assert ss.shares[2] == Share(2, 2, "111")

    def test_parse_json(self):
        ss = parse_share_set(json.dumps(SAMPLE_DOCUMENT))
        assert ss.shares[2].base == 2

    def test_string_keys_counts(self):
        ss = load_share_set({"keys": {"n": "2", "k": "1"}, "1": {"base": 10, "value": "5"}})
        assert (ss.n, ss.k) == (2, 1)

    def test_ignores_non_numeric_keys(self, sample_document):
        sample_document["comment"] = {"anything": True}
        ss = load_share_set(sample_document)
        assert sorted(ss.shares) == [1, 2, 3]

    def test_invalid_json(self):
        with pytest.raises(InvalidEncoding):
            parse_share_set("{not json")

    def test_missing_keys(self):
        with pytest.raises(InvalidEncoding):
            load_share_set({"1": {"base": "10", "value": "4"}})
        with pytest.raises(InvalidEncoding):
            load_share_set({"keys": {"n": 3}})
        with pytest.raises(InvalidEncoding):
            load_share_set([1, 2, 3])

    def test_bad_share_entry(self, sample_document):
        sample_document["2"] = {"value": "111"}
        with pytest.raises(InvalidEncoding):
            load_share_set(sample_document)

    def test_bad_base(self, sample_document):
        sample_document["2"]["base"] = "40"
        with pytest.raises(InvalidEncoding):
            load_share_set(sample_document)

    def test_zero_index(self, sample_document):
        sample_document["0"] = {"base": "10", "value": "1"}
        with pytest.raises(InvalidEncoding):
            load_share_set(sample_document)

    def test_bad_threshold(self):
        with pytest.raises(InvalidEncoding):
            ShareSet(n=3, k=0)
        with pytest.raises(InvalidEncoding):
            load_share_set({"keys": {"n": 3, "k": "three"}})


class TestSelection:

    def test_first_k_in_order(self, sample_document):
        points = select_points(load_share_set(sample_document))
        assert points == [(1, 4), (2, 7), (3, 12)]

    def test_gaps_skipped(self):
        doc = {
            "keys": {"n": 6, "k": 2},
            "2": {"base": "10", "value": "5"},
            "5": {"base": "16", "value": "a"},
            "6": {"base": "10", "value": "1"},
        }
        assert select_points(load_share_set(doc)) == [(2, 5), (5, 10)]

    def test_indices_beyond_n_ignored(self, sample_document):
        # Index 6 is outside n=4, so only three shares are usable
        sample_document["keys"]["k"] = 4
        with pytest.raises(InsufficientShares) as exc:
            select_points(load_share_set(sample_document))
        assert (exc.value.found, exc.value.needed) == (3, 4)

    def test_exactly_k(self):
        doc = {"keys": {"n": 2, "k": 2},
               "1": {"base": "10", "value": "1"},
               "2": {"base": "10", "value": "2"}}
        assert len(select_points(load_share_set(doc))) == 2

    def test_k_minus_one_fails(self, sample_document):
        del sample_document["3"]
        with pytest.raises(InsufficientShares):
            select_points(load_share_set(sample_document))

    def test_invalid_value_surfaces(self, sample_document):
        sample_document["2"]["value"] = "112"
        ss = load_share_set(sample_document)
        with pytest.raises(InvalidEncoding):
            select_points(ss)


class TestLargeInputs:

    def test_5000_digit_decimal_value(self):
        assert decode_value("7" * 5000, 10) == 7 * (10 ** 5000 - 1) // 9

    def test_5000_digit_base_36_value(self):
        assert decode_value("-" + "z" * 5000, 36) == -(36 ** 5000 - 1)

    def test_huge_declared_n(self):
        doc = {"keys": {"n": 10 ** 12, "k": 2},
               "1": {"base": "10", "value": "4"},
               "2": {"base": "10", "value": "7"}}
        assert select_points(load_share_set(doc)) == [(1, 4), (2, 7)]

    def test_huge_declared_n_insufficient(self):
        doc = {"keys": {"n": str(10 ** 12), "k": 3},
               "1": {"base": "10", "value": "4"},
               "2": {"base": "10", "value": "7"}}
        with pytest.raises(InsufficientShares):
            select_points(load_share_set(doc))

    def test_huge_threshold_message(self):
        doc = {"keys": {"n": 1, "k": 10 ** 5000}, "1": {"base": "10", "value": "4"}}
        with pytest.raises(InsufficientShares) as exc:
            select_points(load_share_set(doc))
        assert exc.value.needed == 10 ** 5000

    @pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"),
                        reason="int digit limit added in Python 3.11")
    def test_over_long_json_int(self):
        text = '{"keys": {"n": ' + "9" * 5000 + ', "k": 1}}'
        with pytest.raises(InvalidEncoding):
            parse_share_set(text)

    def test_undecodable_bytes(self):
        with pytest.raises(InvalidEncoding):
            parse_share_set(b'{"keys": \xff}')


class TestOutOfRangeIndices:

    def test_malformed_share_above_n_ignored(self, sample_document):
        sample_document["keys"]["n"] = 3
        sample_document["9"] = {"base": "99", "value": "zz"}
        ss = load_share_set(sample_document)
        assert sorted(ss.shares) == [1, 2, 3]
        assert select_points(ss) == [(1, 4), (2, 7), (3, 12)]

    def test_entry_without_fields_above_n_ignored(self, sample_document):
        sample_document["5"] = "not a share"
        assert sorted(load_share_set(sample_document).shares) == [1, 2, 3]
