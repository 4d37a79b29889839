"""Registration lifecycle: count/length invariants across mixed sequences.

Covers:
- registered_count == N - M after N registers and M unregisters
- registered_count == len(registrations), within [0, max_participants], after every step
- declined operations leave the event untouched
- the capacity-2 walkthrough
"""
import random

from eventhub.services.event_store import EventStore
from tests.conftest import make_event_data


def _assert_invariants(store: EventStore, event_id: str) -> None:
    event = store.get_event(event_id)
    assert event.registered_count == len(event.registrations)
    assert 0 <= event.registered_count <= event.max_participants


class TestCapacityWalkthrough:
    """One event, two spots, three attempts."""

    def test_capacity_two(self, event_store):
        event = event_store.create_event(make_event_data(max_participants=2))

        assert event_store.register(event.id) is True
        assert event_store.get_event(event.id).registered_count == 1
        assert event_store.register(event.id) is True
        assert event_store.get_event(event.id).registered_count == 2
        assert event_store.register(event.id) is False
        assert event_store.get_event(event.id).registered_count == 2

        first = event_store.get_event_registrations(event.id)[0]
        assert event_store.unregister(event.id, first.id) is True
        assert event_store.get_event(event.id).registered_count == 1
        _assert_invariants(event_store, event.id)

    def test_freed_spot_can_be_taken_again(self, event_store):
        event = event_store.create_event(make_event_data(max_participants=1))
        event_store.register(event.id)
        reg = event_store.get_event_registrations(event.id)[0]
        event_store.unregister(event.id, reg.id)
        assert event_store.register(event.id) is True
        _assert_invariants(event_store, event.id)


class TestRandomSequences:
    """Seeded random interleavings of register / unregister."""

    def test_counts_track_successful_operations(self, event_store):
        rng = random.Random(1234)
        event = event_store.create_event(make_event_data(max_participants=5))
        registered = unregistered = 0

        for _ in range(300):
            regs = event_store.get_event_registrations(event.id)
            if regs and rng.random() < 0.45:
                target = rng.choice(regs).id if rng.random() < 0.8 else "bogus"
                if event_store.unregister(event.id, target):
                    unregistered += 1
            elif event_store.register(event.id):
                registered += 1
            _assert_invariants(event_store, event.id)
            assert event_store.get_event(event.id).registered_count == registered - unregistered

    def test_operations_on_one_event_leave_others_alone(self, event_store):
        a = event_store.create_event(make_event_data(name="A"))
        b = event_store.create_event(make_event_data(name="B"))
        event_store.register(a.id)
        event_store.register(a.id)
        assert event_store.get_event(b.id).registered_count == 0
        reg = event_store.get_event_registrations(a.id)[0]
        # a registration id only counts on its own event
        assert event_store.unregister(b.id, reg.id) is False
        assert event_store.get_event(a.id).registered_count == 2
