import os

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DATA_FILE = os.getenv("DATA_FILE", "/var/lib/hr-attendance/hr_snapshot.json")

LEAVE_TIE_BREAK = os.getenv("LEAVE_TIE_BREAK", "FIRST_MATCH")
