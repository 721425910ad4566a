"""Unit tests for event grouping."""
from datetime import datetime

from processor.event_grouper import MAIN_EVENT, clean_event_name, group_events
from processor.models import Category, Event, GroupKey, Sport

MORNING = (datetime(2021, 7, 24, 10, 0), datetime(2021, 7, 24, 13, 0))
EVENING = (datetime(2021, 7, 24, 19, 0), datetime(2021, 7, 24, 22, 0))


def add(sport, category_name, name, location="Tokyo Stadium", times=MORNING):
    sport.categories[category_name].add_event(
        Event(name=name, location=location, start=times[0], end=times[1])
    )


def make_sport(*categories):
    sport = Sport("Test Sport", "/icon.svg")
    for category in categories:
        sport.categories[category.name] = category
    return sport


class TestCleanEventName:
    """Test cases for clean_event_name."""

    def test_strips_label(self):
        """Test that the category prefix is removed."""
        assert clean_event_name("Men's 100m Heats", "Men's 100m", "Men's 100m") == "Heats"

    def test_strips_separator(self):
        """Test that a separator left after the prefix is removed."""
        assert clean_event_name("Men's Team - Final", "Men's Team", "Men's Team") == "Final"
        assert clean_event_name("Men's Team / Bronze", "Men's Team", "Men's Team") == "Bronze"

    def test_keeps_leading_word_character(self):
        """Test that only separator characters are removed, not words."""
        assert clean_event_name("Men's 4 x 100m Relay", "Men's", "Men's") == "4 x 100m Relay"

    def test_empty_name_becomes_main_event(self):
        """Test that a name equal to the category becomes Main Event."""
        assert clean_event_name("Football Men's", "Football Men's", "Football Men's") == MAIN_EVENT
        assert MAIN_EVENT == "Main Event"

    def test_only_separator_left(self):
        """Test a name reduced to whitespace becomes Main Event."""
        assert clean_event_name("Men's   ", "Men's", "Men's") == MAIN_EVENT

    def test_redirected_category_name(self):
        """Test stripping when the category name differs from its label."""
        assert clean_event_name("Men Individual", "Men's", "Men") == "Individual"

    def test_prefix_only_removed_from_start(self):
        """Test that the label is not removed from the middle of the name."""
        assert clean_event_name("Final Men's", "Men's", "Men's") == "Final Men's"


class TestGroupEvents:
    """Test cases for group_events."""

    def test_round_trip_single_event(self):
        """Test grouping of a single event."""
        sport = make_sport(Category("Men's 100m"))
        add(sport, "Men's 100m", "Men's 100m Heats")

        groups = group_events(sport)

        key = GroupKey(MORNING[0], MORNING[1], "Tokyo Stadium")
        assert groups == {key: {"Men's 100m": ["Heats"]}}

    def test_partition_by_start_end_location(self):
        """Test that events share a group only when all key fields match."""
        sport = make_sport(Category("Men's"), Category("Women's"))
        add(sport, "Men's", "Men's Heats")
        add(sport, "Women's", "Women's Heats")
        add(sport, "Men's", "Men's Final", times=EVENING)
        add(sport, "Women's", "Women's Heats", location="Olympic Stadium")

        groups = group_events(sport)

        assert len(groups) == 3
        morning = groups[GroupKey(MORNING[0], MORNING[1], "Tokyo Stadium")]
        assert morning == {"Men's": ["Heats"], "Women's": ["Heats"]}
        assert groups[GroupKey(EVENING[0], EVENING[1], "Tokyo Stadium")] == {"Men's": ["Final"]}
        assert groups[GroupKey(MORNING[0], MORNING[1], "Olympic Stadium")] == {"Women's": ["Heats"]}

        grouped_total = sum(len(names) for labels in groups.values() for names in labels.values())
        assert grouped_total == sport.event_count()

    def test_location_with_delimiter_like_text(self):
        """Test that locations are never confused through string joining."""
        sport = make_sport(Category("Men's"))
        add(sport, "Men's", "Men's Heats", location="Stadium!@£$%A")
        add(sport, "Men's", "Men's Final", location="Stadium")

        groups = group_events(sport)

        assert len(groups) == 2

    def test_redirect_merges_labels(self):
        """Test that redirected categories group under the canonical label."""
        sport = make_sport(Category("Men", redirect="Men's"), Category("Men's"))
        sport.categories["Men's"].add_event(
            Event("Men's Final", "Odaiba Marine Park", MORNING[0], MORNING[1])
        )
        sport.categories["Men"].add_event(
            Event("Men Individual", "Odaiba Marine Park", MORNING[0], MORNING[1])
        )

        groups = group_events(sport)

        key = GroupKey(MORNING[0], MORNING[1], "Odaiba Marine Park")
        assert list(groups[key]) == ["Men's"]
        assert groups[key]["Men's"] == ["Individual", "Final"]

    def test_redirect_label_stripped_when_present(self):
        """Test that the canonical label is stripped when it prefixes the name."""
        sport = make_sport(Category("Men", redirect="Men's"))
        add(sport, "Men", "Men's Final")

        groups = group_events(sport)

        assert list(groups.values()) == [{"Men's": ["Final"]}]

    def test_duplicates_are_kept(self):
        """Test that repeated names stay in the group."""
        sport = make_sport(Category("Men's"))
        add(sport, "Men's", "Men's Preliminary Round")
        add(sport, "Men's", "Men's Preliminary Round")

        groups = group_events(sport)

        assert list(groups.values()) == [{"Men's": ["Preliminary Round", "Preliminary Round"]}]

    def test_label_insertion_order(self):
        """Test that labels keep first-insertion order within a group."""
        sport = make_sport(Category("Women's"), Category("Men's"))
        add(sport, "Men's", "Men's Heats")
        add(sport, "Women's", "Women's Heats")

        labels = list(group_events(sport).values())[0]

        assert list(labels) == ["Women's", "Men's"]

    def test_empty_sport(self):
        """Test grouping a sport with no events."""
        assert group_events(make_sport(Category("Men's"))) == {}

    def test_grouping_does_not_mutate(self):
        """Test that grouping leaves the sport unchanged."""
        sport = make_sport(Category("Men's"))
        add(sport, "Men's", "Men's Heats")

        group_events(sport)
        group_events(sport)

        assert sport.event_count() == 1
        assert sport.categories["Men's"].events[0].name == "Men's Heats"
