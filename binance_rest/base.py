"""Shared plumbing for endpoint groups."""

from __future__ import annotations

from .session import Session


class EndpointGroup:
    """A namespace of endpoint methods bound to one ``Session``."""

    def __init__(self, session: Session):
        self._session = session
