"""Application service: Cancel Registration use case.

The attendee record is deleted outright, not flagged.
"""

from __future__ import annotations

from ems.application.access import Operation, ensure_permitted
from ems.domain.model.attendee import Attendee
from ems.domain.model.user import User
from ems.domain.repository.attendee_repository import AttendeeRepository
from ems.domain.repository.event_repository import EventRepository
from ems.domain.service.registration_service import RegistrationService


class CancelRegistrationHandler:

    def __init__(
        self,
        attendee_repo: AttendeeRepository,
        event_repo: EventRepository,
    ) -> None:
        self._attendee_repo = attendee_repo
        self._event_repo = event_repo

    def handle(self, user: User, event_id: int) -> Attendee:
        ensure_permitted(user, Operation.CANCEL_REGISTRATION)
        svc = RegistrationService(self._attendee_repo, self._event_repo)
        return svc.cancel(user.username, event_id)
