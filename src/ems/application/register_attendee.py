"""Application service: Register Attendee use case.

Only regular users register themselves; the attendee record carries
the user's username as its name.
"""

from __future__ import annotations

from ems.application.access import Operation, ensure_permitted
from ems.application.dto import RegistrationResultDTO
from ems.domain.exceptions import ValidationError
from ems.domain.model.user import User
from ems.domain.repository.attendee_repository import AttendeeRepository
from ems.domain.repository.event_repository import EventRepository
from ems.domain.service.registration_service import RegistrationService


class RegisterAttendeeHandler:

    def __init__(
        self,
        attendee_repo: AttendeeRepository,
        event_repo: EventRepository,
    ) -> None:
        self._attendee_repo = attendee_repo
        self._event_repo = event_repo

    def handle(self, user: User, event_id: int, contact_info: str) -> RegistrationResultDTO:
        ensure_permitted(user, Operation.REGISTER)
        if not contact_info or not contact_info.strip():
            raise ValidationError("Contact info is required")

        svc = RegistrationService(self._attendee_repo, self._event_repo)
        registration = svc.register(user.username, event_id, contact_info.strip())
        return RegistrationResultDTO(
            attendee_id=registration.attendee.id,  # type: ignore[arg-type]
            attendee_name=registration.attendee.name,
            event_id=registration.event.id,  # type: ignore[arg-type]
            event_name=registration.event.name,
            created=registration.created,
            already_registered=not registration.added,
        )
