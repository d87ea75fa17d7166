from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence


class CommuteLogSource(Protocol):
    """Storage collaborator. Dates are Gregorian ``YYYY-MM-DD`` strings
    compared against the Tehran calendar day of each record."""

    def get_commute_rows(
        self,
        *,
        start_date: str,
        end_date: str,
        personnel_code: Optional[str] = None,
    ) -> Sequence[Mapping[str, Any]]:
        raise NotImplementedError

    def get_short_leave_rows(
        self,
        *,
        start_date: str,
        end_date: str,
        personnel_code: Optional[str] = None,
    ) -> Sequence[Mapping[str, Any]]:
        raise NotImplementedError
