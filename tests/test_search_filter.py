"""Tests for the search filter."""

from factories import make_entries, make_entry

from mushaf.ui.search_filter import filter_entries, matches


class TestMatches:
    def test_empty_query_matches_everything(self):
        assert matches(make_entry(name="X"), "")

    def test_primary_name_substring(self):
        entry = make_entry(number=36, name="سُورَةُ يسٓ", english_name="Yaseen")
        assert matches(entry, "يسٓ")

    def test_primary_name_is_case_insensitive(self):
        entry = make_entry(name="Alpha", english_name="zzz")
        assert matches(entry, "ALP")

    def test_secondary_name_is_case_insensitive(self):
        entry = make_entry(name="البقرة", english_name="Al-Baqara")
        assert matches(entry, "baq")
        assert matches(entry, "BAQ")

    def test_identifier_requires_exact_match(self):
        entry = make_entry(number=12, name="Yusuf")
        assert matches(entry, "12")
        assert not matches(entry, "1")
        assert not matches(entry, "012")

    def test_no_match(self):
        assert not matches(make_entry(number=3, name="C"), "zz")


class TestFilterEntries:
    def test_empty_query_returns_source_list(self):
        entries = make_entries(5)
        assert list(filter_entries(entries, "")) == entries

    def test_empty_source_list(self):
        assert filter_entries([], "anything") == ()

    def test_order_follows_source_list(self):
        entries = [
            make_entry(number=3, name="Cab"),
            make_entry(number=1, name="Abc"),
            make_entry(number=2, name="Xyz"),
        ]
        result = filter_entries(entries, "ab")
        assert [e.number for e in result] == [3, 1]

    def test_single_match(self, abc_entries):
        result = filter_entries(abc_entries, "B")
        assert [e.number for e in result] == [2]

    def test_number_query_also_matches_names_containing_it(self):
        entries = [make_entry(number=2, name="Two"), make_entry(number=7, name="Route 2")]
        assert [e.number for e in filter_entries(entries, "2")] == [2, 7]
