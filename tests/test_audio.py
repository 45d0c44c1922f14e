"""Tests for single-slot audio playback."""

from fitness_coach.services.audio import AudioSlot


class FakePlayback:
    def __init__(self, events: list, name: str):
        self.events = events
        self.name = name

    def stop(self):
        self.events.append(f"stop {self.name}")


class TestAudioSlot:
    """Tests for AudioSlot."""

    def test_replace_stops_previous_first(self):
        """Starting new audio stops the old one before it is held."""
        events = []
        slot = AudioSlot()
        first = slot.replace(FakePlayback(events, "workout"))
        second = slot.replace(FakePlayback(events, "diet"))

        assert events == ["stop workout"]
        assert slot.current is second
        assert slot.current is not first

    def test_stop(self):
        events = []
        slot = AudioSlot()
        slot.replace(FakePlayback(events, "workout"))

        slot.stop()
        slot.stop()

        assert events == ["stop workout"]
        assert not slot.is_playing

    def test_release_only_current(self):
        """A finished handle that was already replaced is ignored."""
        events = []
        slot = AudioSlot()
        old = slot.replace(FakePlayback(events, "workout"))
        new = slot.replace(FakePlayback(events, "diet"))

        slot.release(old)
        assert slot.current is new

        slot.release(new)
        assert not slot.is_playing
