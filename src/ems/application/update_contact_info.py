"""Application service: Update Contact Info use case."""

from __future__ import annotations

from ems.application.access import Operation, ensure_permitted
from ems.domain.exceptions import ValidationError
from ems.domain.model.attendee import Attendee
from ems.domain.model.user import User
from ems.domain.repository.attendee_repository import AttendeeRepository
from ems.domain.repository.event_repository import EventRepository
from ems.domain.service.registration_service import RegistrationService


class UpdateContactInfoHandler:

    def __init__(
        self,
        attendee_repo: AttendeeRepository,
        event_repo: EventRepository,
    ) -> None:
        self._attendee_repo = attendee_repo
        self._event_repo = event_repo

    def handle(self, user: User, contact_info: str) -> Attendee:
        """Update the user's attendee records; returns the generic profile."""
        ensure_permitted(user, Operation.UPDATE_CONTACT_INFO)
        if not contact_info or not contact_info.strip():
            raise ValidationError("Contact info is required")

        svc = RegistrationService(self._attendee_repo, self._event_repo)
        return svc.update_contact_info(user.username, contact_info.strip())
