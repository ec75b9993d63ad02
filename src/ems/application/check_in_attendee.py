"""Application service: Check In Attendee use case.

Checking in someone who is already checked in is reported back in the
result rather than raised.
"""

from __future__ import annotations

from ems.application.dto import CheckInResultDTO
from ems.domain.repository.attendee_repository import AttendeeRepository
from ems.domain.repository.event_repository import EventRepository
from ems.domain.service.registration_service import RegistrationService


class CheckInAttendeeHandler:

    def __init__(
        self,
        attendee_repo: AttendeeRepository,
        event_repo: EventRepository,
    ) -> None:
        self._attendee_repo = attendee_repo
        self._event_repo = event_repo

    def handle(self, attendee_id: int, event_id: int) -> CheckInResultDTO:
        svc = RegistrationService(self._attendee_repo, self._event_repo)
        attendee, changed = svc.check_in(attendee_id, event_id)
        return CheckInResultDTO(
            attendee_id=attendee_id,
            attendee_name=attendee.name,
            event_id=event_id,
            already_checked_in=not changed,
        )
