import os

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

# Empty means start with an empty snapshot
DATA_FILE = os.getenv("DATA_FILE", "")

LEAVE_TIE_BREAK = "FIRST_MATCH"
