"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import ProjectType

FULL_DAY_HOURS = 7.5

UNKNOWN_EMPLOYEE_NAME = "Unknown"
NO_PROJECT_NAME = "No project"

PROJECT_TYPE_COLORS = {
    ProjectType.INTERNAL: "#3b82f6",
    ProjectType.CUSTOMER: "#10b981",
}

# Historical tokens written by earlier versions of the dashboard.
PROJECT_TYPE_ALIASES = {
    "internal": ProjectType.INTERNAL,
    "internt": ProjectType.INTERNAL,
    "customer": ProjectType.CUSTOMER,
    "kunde": ProjectType.CUSTOMER,
}

# Time of day used when an entry is created for a whole date.
ENTRY_TIME_OF_DAY = "12:00:00"

TIME_LOGS_TABLE = "he_time_logs"
EMPLOYEES_TABLE = "he_time_users"
PROJECTS_TABLE = "he_time_projects"
