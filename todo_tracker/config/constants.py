"""
Application constants
"""

# Dates
DATE_FORMAT = "%Y-%m-%d"  # due dates are stored as YYYY-MM-DD

# Persistence
JSON_INDENT = 4

# Task status labels shown by `list`
STATUS_COMPLETED = "completed"
STATUS_ONGOING = "ongoing"  # due today
STATUS_PENDING = "pending"

# Terminal colors
COLOR_GREEN = "\033[32m"
COLOR_BLUE = "\033[34m"
COLOR_RESET = "\033[0m"

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "todo_tracker.log"
