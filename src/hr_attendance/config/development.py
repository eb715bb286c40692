import os

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# JSON snapshot of the HR collections (employees, timeLogs, ...)
DATA_FILE = os.getenv("DATA_FILE", "data/hr_snapshot.json")

# FIRST_MATCH | EARLIEST_START | LATEST_START | SHORTEST_SPAN
LEAVE_TIE_BREAK = os.getenv("LEAVE_TIE_BREAK", "FIRST_MATCH")
