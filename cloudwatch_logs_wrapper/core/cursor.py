"""
Pagination cursor shared by the retrieval and enumeration loops.

The two CloudWatch Logs paging styles end differently:
- GetLogEvents never drops its token. The stream is exhausted when a page
  is empty, or when the forward token handed back equals the one just sent.
- DescribeLogGroups / DescribeLogStreams drop ``nextToken`` on the last page.

PageCursor makes the loop state explicit instead of comparing optional
strings in the loop bodies.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class CursorState(str, Enum):
    """Loop state of a paginated request sequence."""
    START = "start"
    CONTINUE = "continue"
    EXHAUSTED = "exhausted"


class PageCursor(BaseModel):
    """Immutable cursor: START (no token sent yet), CONTINUE(token) or EXHAUSTED."""

    state: CursorState = CursorState.START
    token: Optional[str] = None
    pages_fetched: int = 0

    model_config = ConfigDict(frozen=True)

    @classmethod
    def start(cls) -> "PageCursor":
        return cls()

    @property
    def is_exhausted(self) -> bool:
        return self.state == CursorState.EXHAUSTED

    @property
    def request_token(self) -> Optional[str]:
        """Token to send with the next request (None on the first request)."""
        return self.token if self.state == CursorState.CONTINUE else None

    def exhausted(self) -> "PageCursor":
        return PageCursor(state=CursorState.EXHAUSTED, token=self.token, pages_fetched=self.pages_fetched + 1)

    def advance_events(self, forward_token: Optional[str], page_was_empty: bool) -> "PageCursor":
        """Advance after a GetLogEvents page.

        Exhausted when the page was empty, when no forward token came back,
        or when the forward token equals the token that was just sent. The
        equality check only applies once a token has been sent: the first
        page is never compared. An empty-string token is a real token.
        """
        if page_was_empty or forward_token is None:
            return self.exhausted()
        if self.state == CursorState.CONTINUE and forward_token == self.token:
            return self.exhausted()
        return PageCursor(state=CursorState.CONTINUE, token=forward_token, pages_fetched=self.pages_fetched + 1)

    def advance_listing(self, next_token: Optional[str]) -> "PageCursor":
        """Advance after a Describe* page; exhausted once ``nextToken`` is absent."""
        if next_token is None:
            return self.exhausted()
        return PageCursor(state=CursorState.CONTINUE, token=next_token, pages_fetched=self.pages_fetched + 1)
