import pytest

from norcina.event import Event


def test_there_are_seventeen_events_with_contiguous_ids():
    assert len(Event) == 17
    assert [Event(i).id() for i in range(17)] == list(range(17))
    with pytest.raises(ValueError):
        Event(17)


def test_default_is_cube3():
    assert Event.default() is Event.CUBE3


def test_known_names():
    assert Event.CUBE3.str_id() == "333"
    assert Event.BLIND3.full_name() == "3x3x3 Blindfolded"
    assert Event.SQUARE1.short_name() == "Square-1"


@pytest.mark.parametrize("event_id", range(17))
def test_str_is_short_name(event_id):
    event = Event(event_id)
    assert str(event) == event.short_name()
    assert f"{event}" == event.short_name()


def test_str_is_short_name_known_values():
    assert str(Event.CUBE2) == "2x2"
    assert str(Event.FEWEST_MOVES if hasattr(Event, "FEWEST_MOVES") else Event(10)) == "FM"


def test_str_ids_are_unique():
    ids = [Event(i).str_id() for i in range(17)]
    assert len(set(ids)) == 17
    assert ids[0] == "222"
    assert ids[16] == "sq-1"


def test_full_names_are_unique():
    names = [Event(i).full_name() for i in range(17)]
    assert len(set(names)) == 17
    assert names[1] == "3x3x3 Cube"
    assert names[13] == "Megaminx"


@pytest.mark.parametrize("event", list(Event))
def test_lookup_by_id_round_trips(event):
    assert Event(event.id()) is event