from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Actor role handed over by the authentication layer."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    """Daily attendance status as stored in the record store."""

    ABSENT = "Absent"
    PRESENT = "Present"
    HALF_DAY = "Half-day"


class RequestStatus(str, Enum):
    """Approval workflow status (leave / regularization)."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class LeaveType(str, Enum):
    ANNUAL = "Annual Leave"
    SICK = "Sick Leave"
    PERSONAL = "Personal Leave"
    MATERNITY = "Maternity Leave"
    PATERNITY = "Paternity Leave"
    EMERGENCY = "Emergency Leave"


class IssueType(str, Enum):
    MISSED_PUNCH_IN = "Missed Punch In"
    MISSED_PUNCH_OUT = "Missed Punch Out"
    LATE_ARRIVAL = "Late Arrival"
    EARLY_DEPARTURE = "Early Departure"
    FORGOT_TO_PUNCH = "Forgot to Punch"
    SYSTEM_ERROR = "System Error"
    OTHER = "Other"
