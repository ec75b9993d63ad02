"""Role-gated dispatch table.

Every operation a user can invoke is named here, and each role maps to
the set of operations it may call.  Accounts tagged ``Role.NONE`` may
call nothing.
"""

from __future__ import annotations

from enum import Enum

from ems.domain.exceptions import PermissionDeniedError
from ems.domain.model.user import Role, User


class Operation(Enum):
    MANAGE_USERS = "manage_users"
    CREATE_EVENT = "create_event"
    EDIT_EVENT = "edit_event"
    UPDATE_EVENT_STATUS = "update_event_status"
    DELETE_EVENT = "delete_event"
    VIEW_EVENTS = "view_events"
    VIEW_ATTENDEES = "view_attendees"
    CHECK_IN = "check_in"
    ATTENDANCE_REPORT = "attendance_report"
    MANAGE_INVENTORY = "manage_inventory"
    VIEW_INVENTORY = "view_inventory"
    ALLOCATE_INVENTORY = "allocate_inventory"
    EXPORT_DATA = "export_data"
    REGISTER = "register"
    CANCEL_REGISTRATION = "cancel_registration"
    UPDATE_CONTACT_INFO = "update_contact_info"


OPERATIONS_BY_ROLE: dict[Role, frozenset[Operation]] = {
    Role.ADMIN: frozenset(
        {
            Operation.MANAGE_USERS,
            Operation.CREATE_EVENT,
            Operation.EDIT_EVENT,
            Operation.UPDATE_EVENT_STATUS,
            Operation.DELETE_EVENT,
            Operation.VIEW_EVENTS,
            Operation.VIEW_ATTENDEES,
            Operation.CHECK_IN,
            Operation.ATTENDANCE_REPORT,
            Operation.MANAGE_INVENTORY,
            Operation.VIEW_INVENTORY,
            Operation.ALLOCATE_INVENTORY,
            Operation.EXPORT_DATA,
        }
    ),
    Role.REGULAR_USER: frozenset(
        {
            Operation.VIEW_EVENTS,
            Operation.REGISTER,
            Operation.CANCEL_REGISTRATION,
            Operation.UPDATE_CONTACT_INFO,
        }
    ),
    Role.NONE: frozenset(),
}


def is_permitted(user: User, operation: Operation) -> bool:
    return operation in OPERATIONS_BY_ROLE.get(user.role, frozenset())


def ensure_permitted(user: User, operation: Operation) -> None:
    if not is_permitted(user, operation):
        raise PermissionDeniedError(
            f"User '{user.username}' ({user.role.name}) may not {operation.value.replace('_', ' ')}"
        )
