import os

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

MANAGER_PASSWORD = "password"

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))
MOCK_ATTENDANCE_START = "2024-01-01"
MOCK_ATTENDANCE_END = "2024-02-29"
MOCK_RANDOM_SEED = 7
