import unittest

from sprintify.dragselect.config import SelectionConfig
from sprintify.dragselect.geometry import Point, Rect, Vector
from sprintify.dragselect.interaction.selection import DragSelection, GesturePhase, PointerButton

from fakes import FakeScheduler, FakeViewport, GridItems


class DragSelectionTestCase(unittest.TestCase):
    def setUp(self):
        self.viewport = FakeViewport(width=500, height=400, content_width=2000, content_height=2000)
        self.items = GridItems(self.viewport, rows=20, columns=20, size=10)
        self.scheduler = FakeScheduler()
        self.selection = DragSelection(self.items, self.scheduler, viewport=self.viewport)
        self.viewport.on_scroll = self.selection.scrolled

        self.changes = []
        self.phases = []
        self.selection.on_selection_changed = self.changes.append
        self.selection.on_phase_changed = self.phases.append

    def drag(self, start, *moves):
        self.selection.pointer_down(Point(*start))
        for move in moves:
            self.selection.pointer_move(Point(*move))


class TestGesturePhases(DragSelectionTestCase):
    def test_press_enters_pending(self):
        self.assertTrue(self.selection.pointer_down(Point(5, 5)))
        self.assertEqual(self.selection.phase, GesturePhase.PENDING)
        self.assertEqual(self.selection.drag_vector, Vector(5, 5, 0, 0))
        self.assertEqual(self.selection.scroll_vector, Vector(0, 0, 0, 0))

    def test_press_records_scroll_origin(self):
        self.viewport.scroll_to(40, 60)
        self.selection.pointer_down(Point(5, 5))
        self.assertEqual(self.selection.scroll_vector, Vector(40, 60, 0, 0))

    def test_sub_threshold_moves_never_select(self):
        self.drag((5, 5), (8, 8), (11, 12), (5, 14))
        self.assertEqual(self.selection.phase, GesturePhase.PENDING)
        self.assertEqual(self.selection.drag_vector, Vector(5, 5, 0, 9))
        self.assertEqual(self.changes, [])
        self.assertEqual(self.selection.selected_items, frozenset())
        self.assertFalse(self.viewport.focused)
        self.assertFalse(self.selection.auto_scroller.active)

    def test_threshold_starts_drag(self):
        self.drag((5, 5), (15, 5))
        self.assertEqual(self.selection.phase, GesturePhase.DRAGGING)
        self.assertTrue(self.viewport.focused)
        self.assertTrue(self.selection.auto_scroller.active)
        self.assertEqual(self.selection.selected_items, self.items.ids([0], [0, 1]))

    def test_phase_callbacks(self):
        self.drag((5, 5), (30, 30))
        self.selection.pointer_up()
        self.assertEqual(self.phases, [GesturePhase.PENDING, GesturePhase.DRAGGING, GesturePhase.IDLE])

    def test_secondary_buttons_ignored(self):
        self.assertFalse(self.selection.pointer_down(Point(5, 5), PointerButton.SECONDARY))
        self.assertFalse(self.selection.pointer_down(Point(5, 5), PointerButton.MIDDLE))
        self.assertEqual(self.selection.phase, GesturePhase.IDLE)
        self.assertFalse(self.selection.pointer_move(Point(50, 50)))

    def test_secondary_release_does_not_end_drag(self):
        self.drag((5, 5), (30, 30))
        self.assertFalse(self.selection.pointer_up(PointerButton.SECONDARY))
        self.assertEqual(self.selection.phase, GesturePhase.DRAGGING)

    def test_move_without_press_ignored(self):
        self.assertFalse(self.selection.pointer_move(Point(50, 50)))
        self.assertEqual(self.selection.phase, GesturePhase.IDLE)


class TestCommitAndReset(DragSelectionTestCase):
    def test_end_to_end_drag(self):
        self.drag((5, 5), (25, 25))
        self.assertEqual(self.selection.selection_rect, Rect(5, 5, 20, 20))

        self.assertTrue(self.selection.pointer_up())
        self.assertEqual(self.selection.selected_items, self.items.ids(range(3), range(3)))
        self.assertEqual(self.selection.phase, GesturePhase.IDLE)
        self.assertIsNone(self.selection.drag_vector)
        self.assertIsNone(self.selection.scroll_vector)
        self.assertIsNone(self.selection.selection_rect)
        self.assertFalse(self.selection.auto_scroller.active)
        self.assertEqual(self.scheduler.pending, {})

    def test_selection_replaced_not_merged(self):
        self.drag((5, 5), (25, 25), (105, 105))
        self.drag((105, 105), (125, 125))
        self.assertNotIn("0", self.selection.selected_items)
        self.assertIn("210", self.selection.selected_items)

    def test_shrinking_drag_deselects(self):
        self.drag((5, 5), (45, 45), (25, 25))
        self.assertEqual(self.selection.selected_items, self.items.ids(range(3), range(3)))

    def test_click_clears_selection(self):
        self.drag((5, 5), (25, 25))
        self.selection.pointer_up()
        self.assertEqual(len(self.selection.selected_items), 9)

        self.drag((15, 15), (18, 17))
        self.selection.pointer_up()
        self.assertEqual(self.selection.selected_items, frozenset())
        self.assertEqual(self.changes[-1], frozenset())
        self.assertEqual(self.selection.phase, GesturePhase.IDLE)

    def test_escape_cancels_drag(self):
        self.drag((5, 5), (25, 25))
        self.assertEqual(len(self.selection.selected_items), 9)

        self.assertTrue(self.selection.key_pressed("Escape"))
        self.assertEqual(self.selection.selected_items, frozenset())
        self.assertEqual(self.selection.phase, GesturePhase.IDLE)
        self.assertIsNone(self.selection.drag_vector)
        self.assertFalse(self.selection.auto_scroller.active)
        self.assertEqual(self.scheduler.pending, {})

    def test_escape_cancels_pending(self):
        self.drag((5, 5), (8, 8))
        self.selection.key_pressed("Escape")
        self.assertEqual(self.selection.phase, GesturePhase.IDLE)
        self.assertFalse(self.selection.pointer_move(Point(50, 50)))

    def test_custom_cancel_key(self):
        selection = DragSelection(self.items, self.scheduler, viewport=self.viewport,
                                  config=SelectionConfig(cancel_key="q"))
        selection.pointer_down(Point(5, 5))
        selection.pointer_move(Point(25, 25))
        self.assertFalse(selection.key_pressed("Escape"))
        self.assertTrue(selection.key_pressed("q"))
        self.assertEqual(selection.selected_items, frozenset())

    def test_press_while_dragging_restarts(self):
        self.drag((5, 5), (25, 25))
        self.selection.pointer_down(Point(100, 100))
        self.assertEqual(self.selection.phase, GesturePhase.PENDING)
        self.assertFalse(self.selection.auto_scroller.active)
        self.assertEqual(self.selection.drag_vector, Vector(100, 100, 0, 0))

    def test_clear_selection(self):
        self.drag((5, 5), (25, 25))
        self.selection.pointer_up()
        self.selection.clear_selection()
        self.assertEqual(self.selection.selected_items, frozenset())


class TestScrollFeedback(DragSelectionTestCase):
    def test_scroll_during_drag_extends_selection(self):
        self.drag((5, 5), (25, 25))
        self.viewport.scroll_to(0, 40)
        self.assertEqual(self.selection.scroll_vector, Vector(0, 0, 0, 40))
        self.assertEqual(self.selection.selection_rect, Rect(5, 5, 20, 60))
        self.assertEqual(self.selection.selected_items, self.items.ids(range(7), range(3)))

    def test_scroll_equals_drag_in_content_space(self):
        self.drag((5, 5), (25, 25))
        self.viewport.scroll_to(30, 0)

        # Same gesture without scrolling, pointer moved 30 further instead
        viewport = FakeViewport()
        reference = DragSelection(GridItems(viewport), FakeScheduler(), viewport=viewport)
        reference.pointer_down(Point(5, 5))
        reference.pointer_move(Point(55, 25))

        self.assertEqual(self.selection.selected_items, reference.selected_items)
        self.assertEqual(self.selection.selection_rect, reference.selection_rect)
        self.assertEqual(self.selection.selected_items, self.items.ids(range(3), range(6)))

    def test_scroll_while_pending_does_not_select(self):
        self.drag((5, 5), (7, 7))
        self.viewport.scroll_to(0, 40)
        self.assertEqual(self.selection.scroll_vector, Vector(0, 0, 0, 40))
        self.assertEqual(self.changes, [])

    def test_scroll_when_idle_ignored(self):
        self.assertFalse(self.selection.scrolled())

    def test_selection_rect_clamped_to_content(self):
        viewport = FakeViewport(width=80, height=80, content_width=100, content_height=100)
        selection = DragSelection(GridItems(viewport), self.scheduler, viewport=viewport)
        selection.pointer_down(Point(5, 5))
        selection.pointer_move(Point(150, 150))
        self.assertEqual(selection.selection_rect, Rect(5, 5, 95, 95))

    def test_selection_rect_none_until_dragging(self):
        self.drag((5, 5), (8, 8))
        self.assertIsNone(self.selection.selection_rect)


class TestNonCancelKey(DragSelectionTestCase):
    """Any key other than the cancel key drops the scroll origin.

    Kept as-is: the rest of the gesture then ignores moves and scrolls, so the
    selection freezes until release. Revisit if that turns out to be unwanted.
    """

    def test_key_drops_scroll_vector(self):
        self.drag((5, 5), (25, 25))
        self.assertFalse(self.selection.key_pressed("a"))
        self.assertIsNone(self.selection.scroll_vector)
        self.assertEqual(self.selection.phase, GesturePhase.DRAGGING)

    def test_moves_after_key_are_ignored(self):
        self.drag((5, 5), (25, 25))
        self.selection.key_pressed("Shift")
        self.assertFalse(self.selection.pointer_move(Point(105, 105)))
        self.assertFalse(self.selection.scrolled())
        self.assertEqual(self.selection.selected_items, self.items.ids(range(3), range(3)))

    def test_release_after_key_commits_frozen_selection(self):
        self.drag((5, 5), (25, 25))
        self.selection.key_pressed("a")
        self.selection.pointer_up()
        self.assertEqual(len(self.selection.selected_items), 9)
        self.assertEqual(self.selection.phase, GesturePhase.IDLE)

    def test_next_press_recaptures_scroll_origin(self):
        self.selection.key_pressed("a")
        self.viewport.scroll_to(0, 20)
        self.selection.pointer_down(Point(5, 5))
        self.assertEqual(self.selection.scroll_vector, Vector(0, 20, 0, 0))


class TestViewportAvailability(DragSelectionTestCase):
    def test_handlers_noop_without_viewport(self):
        selection = DragSelection(self.items, self.scheduler)
        self.assertFalse(selection.pointer_down(Point(5, 5)))
        self.assertFalse(selection.pointer_move(Point(25, 25)))
        self.assertFalse(selection.scrolled())
        self.assertFalse(selection.pointer_up())
        self.assertFalse(selection.key_pressed("Escape"))
        self.assertEqual(selection.phase, GesturePhase.IDLE)
        self.assertIsNone(selection.selection_rect)

    def test_attach_later(self):
        selection = DragSelection(self.items, self.scheduler)
        selection.attach(self.viewport)
        selection.pointer_down(Point(5, 5))
        selection.pointer_move(Point(25, 25))
        self.assertEqual(len(selection.selected_items), 9)

    def test_detach_mid_drag_keeps_selection(self):
        self.drag((5, 5), (25, 25))
        self.selection.detach()
        self.assertEqual(self.selection.phase, GesturePhase.IDLE)
        self.assertFalse(self.selection.auto_scroller.active)
        self.assertEqual(self.scheduler.pending, {})
        self.assertEqual(len(self.selection.selected_items), 9)
        self.assertFalse(self.selection.pointer_up())

    def test_dispose(self):
        self.drag((5, 5), (25, 25))
        self.selection.dispose()
        self.assertIsNone(self.selection.viewport)
        self.assertIsNone(self.selection.on_selection_changed)
        self.assertEqual(self.scheduler.pending, {})


class TestSelectionConfig(unittest.TestCase):
    def test_defaults(self):
        config = SelectionConfig()
        self.assertEqual((config.drag_threshold, config.edge_margin, config.max_scroll_step), (10, 20, 15))

    def test_invalid_values(self):
        with self.assertRaises(ValueError):
            SelectionConfig(drag_threshold=0)
        with self.assertRaises(ValueError):
            SelectionConfig(edge_margin=-1)
        with self.assertRaises(ValueError):
            SelectionConfig(max_scroll_step=-1)
        with self.assertRaises(ValueError):
            SelectionConfig(frame_interval_ms=0)


if __name__ == '__main__':
    unittest.main()
