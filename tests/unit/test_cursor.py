"""
Tests for PageCursor (core/cursor.py).
"""

from cloudwatch_logs_wrapper.core import CursorState, PageCursor


class TestEventPaging:
    """Termination rules for GetLogEvents paging."""

    def test_start_sends_no_token(self):
        cursor = PageCursor.start()

        assert cursor.state == CursorState.START
        assert cursor.request_token is None
        assert cursor.is_exhausted is False

    def test_first_page_is_never_compared(self):
        """A first page has nothing to compare against, even if its token looks repeated."""
        cursor = PageCursor.start().advance_events("f/1", page_was_empty=False)

        assert cursor.state == CursorState.CONTINUE
        assert cursor.request_token == "f/1"
        assert cursor.pages_fetched == 1

    def test_repeated_token_exhausts(self):
        cursor = PageCursor.start().advance_events("f/1", False).advance_events("f/1", False)

        assert cursor.is_exhausted
        assert cursor.pages_fetched == 2

    def test_new_token_continues(self):
        cursor = PageCursor.start().advance_events("f/1", False).advance_events("f/2", False)

        assert cursor.state == CursorState.CONTINUE
        assert cursor.request_token == "f/2"

    def test_empty_page_exhausts(self):
        assert PageCursor.start().advance_events("f/1", page_was_empty=True).is_exhausted

    def test_missing_forward_token_exhausts(self):
        assert PageCursor.start().advance_events(None, page_was_empty=False).is_exhausted

    def test_empty_string_token_is_a_real_token(self):
        cursor = PageCursor.start().advance_events("", False)

        assert cursor.state == CursorState.CONTINUE
        assert cursor.request_token == ""
        assert cursor.advance_events("", False).is_exhausted


class TestListingPaging:
    """Termination rules for Describe* paging."""

    def test_absent_token_exhausts(self):
        assert PageCursor.start().advance_listing(None).is_exhausted

    def test_present_token_continues_even_if_repeated(self):
        cursor = PageCursor.start().advance_listing("t").advance_listing("t")

        assert cursor.state == CursorState.CONTINUE
        assert cursor.pages_fetched == 2
