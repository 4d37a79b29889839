"""Tests for the listing filters."""
import pytest

from eventhub.schemas.event import EventFilters
from eventhub.services.filtering import filter_events, list_departments, result_count_label
from eventhub.services.seed import demo_events


@pytest.fixture
def events():
    return demo_events()


def _ids(events):
    return [e.id for e in events]


class TestFilterEvents:
    """Each predicate alone and combined."""

    def test_empty_filters_return_everything_in_order(self, events):
        result = filter_events(events, EventFilters(search="", type="", department="", date=""))
        assert _ids(result) == _ids(events)

    def test_search_is_case_insensitive_across_fields(self, events):
        assert _ids(filter_events(events, EventFilters(search="TECH"))) == ["1"]
        # organizer
        assert _ids(filter_events(events, EventFilters(search="research lab"))) == ["3"]
        # description
        assert _ids(filter_events(events, EventFilters(search="basketball"))) == ["4"]

    def test_search_does_not_match_venue(self, events):
        assert filter_events(events, EventFilters(search="Main Auditorium")) == []

    def test_type_exact_match(self, events):
        assert _ids(filter_events(events, EventFilters(type="Workshop"))) == ["3"]
        assert filter_events(events, EventFilters(type="workshop")) == []

    def test_department_exact_match(self, events):
        assert _ids(filter_events(events, EventFilters(department="Computer Science"))) == ["1", "3"]

    def test_date_lower_bound_inclusive(self, events):
        assert _ids(filter_events(events, EventFilters(date="2024-02-20"))) == ["2", "3", "4"]
        assert _ids(filter_events(events, EventFilters(date="2024-03-02"))) == []

    def test_combined_is_intersection(self, events):
        by_dept = set(_ids(filter_events(events, EventFilters(department="Computer Science"))))
        by_date = set(_ids(filter_events(events, EventFilters(date="2024-02-20"))))
        both = filter_events(events, EventFilters(department="Computer Science", date="2024-02-20"))
        assert set(_ids(both)) == by_dept & by_date == {"3"}

    def test_input_is_not_mutated(self, events):
        before = [e.model_copy(deep=True) for e in events]
        filter_events(events, EventFilters(search="fest"))
        assert events == before


class TestHelpers:
    """Department list and result label."""

    def test_departments_distinct_first_seen(self, events):
        events[3].department = None
        assert list_departments(events) == ["Computer Science", "Student Affairs"]

    @pytest.mark.parametrize("count,label", [(0, "0 events found"), (1, "1 event found"), (4, "4 events found")])
    def test_result_count_label(self, count, label):
        assert result_count_label(count) == label
