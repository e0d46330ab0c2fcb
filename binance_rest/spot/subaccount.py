"""Sub-account endpoints (``/sapi/v1/sub-account``), signed."""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..base import EndpointGroup
from ..validators import require_param


class Subaccount(EndpointGroup):
    """Sub-account management for the master account."""

    def sub_account_enable_options(self, email: str, recv_window: Optional[int] = None) -> Dict[str, Any]:
        """Enable options for a sub-account (``POST /sapi/v1/sub-account/eoptions/enable``)."""
        require_param("email", email)
        return self._session.signed_request(
            "/sapi/v1/sub-account/eoptions/enable",
            {"email": email, "recvWindow": recv_window},
            method="POST",
        )

    def sub_account_list(
        self,
        email: Optional[str] = None,
        is_freeze: Optional[bool] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        recv_window: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Query sub-accounts (``GET /sapi/v1/sub-account/list``).

        ``is_freeze`` is sent as ``true``/``false``; ``limit`` default 1,
        max 200.
        """
        return self._session.signed_request(
            "/sapi/v1/sub-account/list",
            {
                "email": email,
                "isFreeze": is_freeze,
                "page": page,
                "limit": limit,
                "recvWindow": recv_window,
            },
        )

    def sub_account_status(self, email: Optional[str] = None, recv_window: Optional[int] = None) -> Any:
        """Sub-account margin/futures status (``GET /sapi/v1/sub-account/status``)."""
        return self._session.signed_request(
            "/sapi/v1/sub-account/status", {"email": email, "recvWindow": recv_window}
        )
