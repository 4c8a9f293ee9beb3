"""
Unit tests for the status registry and its lookups.
"""

import logging
import threading

import pytest

from httpstatus import (
    EntryNotFoundError,
    HTTPStatus,
    StatusCategory,
    StatusEntry,
    StatusPhrase,
    StatusRegistry,
    UnknownCodeError,
    UnknownPhraseError,
    category_of,
    code_of,
    default_registry,
    is_canonical,
    lookup_by_code,
    lookup_by_phrase,
    phrase_of,
)


class TestScenarios:
    """Concrete lookups against the default registry."""

    def test_ok(self):
        """Test 200 OK is a success."""
        assert phrase_of(200) == "OK"
        assert category_of(200) == StatusCategory.SUCCESS

    def test_not_found_round_trip(self):
        """Test 404 <-> Not Found."""
        assert phrase_of(404) == "Not Found"
        assert code_of("Not Found") == 404

    def test_teapot(self):
        """Test 418 is a client error with its joke phrase."""
        assert phrase_of(418) == "I'm a teapot"
        assert category_of(418) == StatusCategory.CLIENT_ERROR

    def test_599_classifies_but_has_no_phrase(self):
        """Test 599 is a server error but not enumerated."""
        assert category_of(599) == StatusCategory.SERVER_ERROR
        with pytest.raises(UnknownCodeError):
            phrase_of(599)

    def test_redirect_phrases_distinct(self):
        """Test 301 and 302 keep distinct phrases."""
        assert phrase_of(301) == "Moved Permanently"
        assert phrase_of(302) == "Moved Temporarily"

    def test_code_of_returns_int(self):
        """Test reverse lookup returns a plain int."""
        code = code_of("Created")
        assert code == 201
        assert type(code) is int


class TestRoundTrip:
    """Tests for phrase_of()/code_of() being inverses."""

    def test_every_entry_round_trips(self):
        """Test phrase_of and code_of invert each other for every entry."""
        for entry in default_registry:
            assert phrase_of(entry.code) == entry.phrase
            assert code_of(entry.phrase) == entry.code
            assert code_of(phrase_of(entry.code)) == entry.code
            assert phrase_of(code_of(entry.phrase)) == entry.phrase

    def test_registry_matches_enum(self):
        """Test the default registry holds exactly the HTTPStatus table."""
        assert len(default_registry) == len(HTTPStatus)
        for status in HTTPStatus:
            entry = lookup_by_code(status)
            assert entry.code == status
            assert entry.phrase == status.phrase
            assert entry.reference == status.reference
            assert entry.deprecated == status.deprecated


class TestUnknownInput:
    """Tests for the error contracts of each lookup."""

    @pytest.mark.parametrize("code", [777, 499, 599, 0, 99, 306, -1])
    def test_phrase_of_unknown_code(self, code):
        """Test phrase_of raises UnknownCodeError instead of guessing."""
        with pytest.raises(UnknownCodeError) as exc_info:
            phrase_of(code)
        assert exc_info.value.code == code

    @pytest.mark.parametrize("code", ["200", None, 200.0, True])
    def test_phrase_of_non_int(self, code):
        """Test phrase_of rejects non-int input."""
        with pytest.raises(UnknownCodeError):
            phrase_of(code)

    @pytest.mark.parametrize("phrase", [
        "not a real phrase",
        "not found",
        "NOT FOUND",
        "Not Found ",
        " Not Found",
        "Found",
        "",
    ])
    def test_code_of_unknown_phrase(self, phrase):
        """Test code_of matching is exact and case-sensitive."""
        with pytest.raises(UnknownPhraseError) as exc_info:
            code_of(phrase)
        assert exc_info.value.phrase == phrase

    def test_code_of_non_string(self):
        """Test code_of rejects non-string input."""
        with pytest.raises(UnknownPhraseError):
            code_of(404)

    def test_lookup_by_code_unknown(self):
        """Test lookup_by_code raises EntryNotFoundError."""
        with pytest.raises(EntryNotFoundError) as exc_info:
            lookup_by_code(499)
        assert exc_info.value.key == 499

    def test_lookup_by_phrase_unknown(self):
        """Test lookup_by_phrase raises EntryNotFoundError."""
        with pytest.raises(EntryNotFoundError):
            lookup_by_phrase("I'm A Teapot")

    def test_errors_are_lookup_errors(self):
        """Test lookup failures can be caught as LookupError."""
        with pytest.raises(LookupError):
            phrase_of(777)
        with pytest.raises(LookupError):
            code_of("nope")
        with pytest.raises(LookupError):
            lookup_by_code(777)


class TestLookups:
    """Tests for full-entry lookups."""

    def test_lookup_by_code(self):
        """Test lookup_by_code returns the full entry."""
        entry = lookup_by_code(404)
        assert entry.code == 404
        assert entry.phrase == "Not Found"
        assert entry.category == StatusCategory.CLIENT_ERROR
        assert not entry.deprecated

    def test_lookup_by_phrase(self):
        """Test lookup_by_phrase returns the full entry."""
        entry = lookup_by_phrase("Use Proxy")
        assert entry.code == 305
        assert entry.deprecated
        assert entry.category == StatusCategory.REDIRECTION

    def test_entry_str(self):
        """Test entries render as 'code phrase'."""
        assert str(lookup_by_code(503)) == "503 Service Unavailable"

    def test_phrase_constants_accepted(self):
        """Test StatusPhrase members work as lookup input."""
        assert code_of(StatusPhrase.NOT_FOUND) == 404
        assert lookup_by_phrase(StatusPhrase.OK).code == 200
        assert is_canonical(HTTPStatus.GONE, StatusPhrase.GONE)

    def test_is_canonical(self):
        """Test pair validation."""
        assert is_canonical(200, "OK")
        assert is_canonical(HTTPStatus.NOT_FOUND, "Not Found")
        assert not is_canonical(302, "Found")
        assert not is_canonical(404, "not found")
        assert not is_canonical(599, "Server Error")
        assert not is_canonical(None, "OK")


class TestStatusRegistry:
    """Tests for StatusRegistry construction and container behaviour."""

    def test_sorted_iteration(self, small_registry):
        """Test entries iterate in ascending code order."""
        codes = [entry.code for entry in small_registry]
        assert codes == sorted(codes)
        assert codes == [100, 200, 302, 404, 418, 503]

    def test_len_and_contains(self, small_registry):
        """Test len() and membership by code."""
        assert len(small_registry) == 6
        assert 418 in small_registry
        assert 201 not in small_registry
        assert "418" not in small_registry

    def test_small_registry_lookups(self, small_registry):
        """Test lookups against a custom registry."""
        assert small_registry.phrase_of(302) == "Moved Temporarily"
        assert small_registry.code_of("Service Unavailable") == 503
        with pytest.raises(UnknownCodeError):
            small_registry.phrase_of(201)

    def test_entries_in(self, full_registry):
        """Test filtering by category."""
        informational = full_registry.entries_in(StatusCategory.INFORMATIONAL)
        assert [entry.code for entry in informational] == [100, 101, 102, 103]

        for category in StatusCategory:
            for entry in full_registry.entries_in(category):
                assert entry.code in category.codes

    def test_category_counts(self, full_registry):
        """Test every category is populated and the counts add up."""
        counts = {
            category: len(full_registry.entries_in(category))
            for category in StatusCategory
        }
        assert counts[StatusCategory.INFORMATIONAL] == 4
        assert counts[StatusCategory.SUCCESS] == 10
        assert counts[StatusCategory.REDIRECTION] == 8
        assert counts[StatusCategory.CLIENT_ERROR] == 29
        assert counts[StatusCategory.SERVER_ERROR] == 10
        assert sum(counts.values()) == len(full_registry)

    def test_duplicate_code_rejected(self):
        """Test construction fails on duplicate codes."""
        with pytest.raises(ValueError, match="Duplicate status code"):
            StatusRegistry([StatusEntry(302, "Found"), StatusEntry(302, "Moved Temporarily")])

    def test_duplicate_phrase_rejected(self):
        """Test construction fails on duplicate phrases."""
        with pytest.raises(ValueError, match="Duplicate reason phrase"):
            StatusRegistry([StatusEntry(404, "Not Found"), StatusEntry(410, "Not Found")])

    @pytest.mark.parametrize("code", [99, 600, 0])
    def test_out_of_range_code_rejected(self, code):
        """Test construction fails on codes outside 100-599."""
        with pytest.raises(ValueError, match="out of range"):
            StatusRegistry([StatusEntry(code, "Whatever")])

    def test_non_int_code_rejected(self):
        """Test construction fails on non-int codes."""
        with pytest.raises(ValueError, match="must be an int"):
            StatusRegistry([StatusEntry(200, "OK"), StatusEntry("404", "Not Found")])

    @pytest.mark.parametrize("phrase", [200, None, b"OK"])
    def test_non_str_phrase_rejected(self, phrase):
        """Test construction fails on phrases that are not strings."""
        with pytest.raises(ValueError, match="must be a str"):
            StatusRegistry([StatusEntry(200, phrase)])

    def test_empty_phrase_rejected(self):
        """Test construction fails on empty phrases."""
        with pytest.raises(ValueError, match="empty phrase"):
            StatusRegistry([StatusEntry(200, "")])

    def test_entries_are_frozen(self):
        """Test entries cannot be mutated."""
        entry = lookup_by_code(200)
        with pytest.raises(AttributeError):
            entry.phrase = "Fine"

    def test_indexes_are_read_only(self, small_registry):
        """Test the internal maps reject writes."""
        with pytest.raises(TypeError):
            small_registry._by_code[201] = StatusEntry(201, "Created")
        with pytest.raises(TypeError):
            small_registry._by_phrase["Created"] = StatusEntry(201, "Created")

    def test_repr(self, small_registry):
        """Test repr shows the entry count."""
        assert repr(small_registry) == "StatusRegistry(6 entries)"


class TestLogging:
    """Tests for registry diagnostics."""

    def test_build_logged(self, caplog, sample_entries):
        """Test construction logs the entry count at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="httpstatus"):
            StatusRegistry(sample_entries)
        assert "Built status registry with 6 entries" in caplog.text

    def test_miss_logged_before_raising(self, caplog):
        """Test a lookup miss is logged at DEBUG and still raises."""
        with caplog.at_level(logging.DEBUG, logger="httpstatus"):
            with pytest.raises(UnknownCodeError):
                phrase_of(499)
        assert "Unknown status code 499" in caplog.text


class TestConcurrency:
    """Tests for concurrent read access."""

    def test_parallel_lookups(self):
        """Test many threads can read the registry at once."""
        errors = []

        def worker():
            try:
                for status in HTTPStatus:
                    assert code_of(phrase_of(status)) == status
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5.0)

        assert errors == []
