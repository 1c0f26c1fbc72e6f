# core/config.py

"""
Program-wide constants for the records manager.

Values here are plain module-level constants. The only runtime override is the
log level, read from the `EDU_RECORDS_LOG_LEVEL` environment variable.
"""

import os

APP_NAME = "EDUCATION CENTRE MANAGEMENT INFORMATION SYSTEM"

# placeholder stored when a name is blank
UNKNOWN_NAME = "Unknown"

CURRENCY_SYMBOL = "$"

# delete confirmation answers
CONFIRM_YES = "1"
CONFIRM_NO = "2"

# Add menu numbers, in menu order
ROLE_MENU = {
    "1": "Teacher",
    "2": "Admin",
    "3": "Student",
}

# record table column widths: id, role, name, telephone, email
COLUMN_WIDTHS = (5, 10, 20, 12, 25)
SALARY_WIDTH = 8
DETAILS_INDENT = " " * 7
TABLE_RULE_WIDTH = 80

LOG_LEVEL = os.environ.get("EDU_RECORDS_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
