"""
Unit tests for notes reduction.
"""
import re

from contact_extraction.postprocessing.notes_reducer import reduce_notes


class TestReduceNotes:

    def test_removes_values_and_collapses_whitespace(self):
        text = "Ali Rezaei\nAcme   09123456789\n ali@acme.com  call after 5"
        notes = reduce_notes(text, ["Ali", "Rezaei", "Acme", "09123456789", "ali@acme.com"])

        assert notes == "call after 5"

    def test_no_extracted_substring_left(self):
        text = "Ali  Acme 09123456789 ali@acme.com note"
        values = ["Ali", "Acme", "09123456789", "ali@acme.com"]
        notes = reduce_notes(text, values)

        for value in values:
            assert value not in notes
        assert not re.search(r"\s{2,}", notes)

    def test_only_first_occurrence_removed(self):
        notes = reduce_notes("09123456789 home, 09123456789 work", ["09123456789"])
        assert notes == "home, 09123456789 work"

    def test_empty_values_skipped(self):
        assert reduce_notes("a  b", ["", "", ""]) == "a b"

    def test_missing_value_is_noop(self):
        assert reduce_notes("hello", ["absent"]) == "hello"

    def test_empty_text(self):
        assert reduce_notes("", ["x"]) == ""
