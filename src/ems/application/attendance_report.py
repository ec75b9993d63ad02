"""Application service: Attendance Report use case (query)."""

from __future__ import annotations

from ems.application.dto import AttendanceReportDTO
from ems.application.references import attendee_line
from ems.domain.exceptions import EntityNotFoundError
from ems.domain.repository.attendee_repository import AttendeeRepository
from ems.domain.repository.event_repository import EventRepository


class AttendanceReportHandler:

    def __init__(
        self,
        event_repo: EventRepository,
        attendee_repo: AttendeeRepository,
    ) -> None:
        self._event_repo = event_repo
        self._attendee_repo = attendee_repo

    def handle(self, event_id: int) -> AttendanceReportDTO:
        """Registered and checked-in counts for one event.

        Dangling attendee ids still count as registered, matching the
        length of the event's attendee list.
        """
        event = self._event_repo.get_by_id(event_id)
        if event is None:
            raise EntityNotFoundError(f"Event with ID {event_id} not found")

        lines = [attendee_line(self._attendee_repo, a) for a in event.attendee_ids]
        return AttendanceReportDTO(
            event_id=event_id,
            event_name=event.name,
            attendees=lines,
            registered=len(lines),
            checked_in=sum(1 for line in lines if line.checked_in),
        )
