"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

NO_PAY_PENALTY = 2500
HALF_DAY_PENALTY = 1200

DEPARTMENT_ID_LENGTH = 4
DEFAULT_MYSQL_PORT = 3306
