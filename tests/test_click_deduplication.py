"""Tests for click deduplication.

st_deckgl returns its last event on every rerun; the last-seen key stops the
same click from opening a dialog again after it was dismissed.
"""

from trail_overlays.ui.state_machine import ClickDeduplicationContext


class TestMakeKey:
    def test_object_and_coordinate(self) -> None:
        key = ClickDeduplicationContext.make_key(coord=(-71.06, 42.3615), obj_id="trail_trail")
        assert key == "trail_trail@-71.06000_42.36150"

    def test_coordinate_only(self) -> None:
        assert ClickDeduplicationContext.make_key(coord=(1.0, 2.0), obj_id=None) == "1.00000_2.00000"

    def test_nearby_coordinates_share_key(self) -> None:
        a = ClickDeduplicationContext.make_key(coord=(-71.060001, 42.3615), obj_id=None)
        b = ClickDeduplicationContext.make_key(coord=(-71.060002, 42.3615), obj_id=None)
        assert a == b


class TestIsNewClick:
    def test_first_click_is_new(self, dedup: ClickDeduplicationContext) -> None:
        assert dedup.is_new_click(coord=(1.0, 2.0), obj_id=None)
        assert dedup.last_click_key == "1.00000_2.00000"

    def test_no_click_data(self, dedup: ClickDeduplicationContext) -> None:
        assert not dedup.is_new_click(coord=None, obj_id=None)
        assert dedup.last_click_key is None

    def test_repeat_rejected(self, dedup: ClickDeduplicationContext) -> None:
        dedup.is_new_click(coord=(1.0, 2.0), obj_id="park")
        assert not dedup.is_new_click(coord=(1.0, 2.0), obj_id="park")

    def test_alternating_clicks_accepted(self, dedup: ClickDeduplicationContext) -> None:
        assert dedup.is_new_click(coord=(1.0, 2.0), obj_id=None)
        assert dedup.is_new_click(coord=(3.0, 4.0), obj_id=None)
        assert dedup.is_new_click(coord=(1.0, 2.0), obj_id=None)

    def test_clear(self, dedup: ClickDeduplicationContext) -> None:
        dedup.is_new_click(coord=(1.0, 2.0), obj_id=None)
        dedup.clear()
        assert dedup.is_new_click(coord=(1.0, 2.0), obj_id=None)
