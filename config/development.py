import os

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Every manager logs in with this one password
MANAGER_PASSWORD = os.getenv("MANAGER_PASSWORD", "password")

# Load the demo employees/tasks/moms/quests and mock attendance on startup
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))
MOCK_ATTENDANCE_START = os.getenv("MOCK_ATTENDANCE_START", "2024-01-01")
MOCK_ATTENDANCE_END = os.getenv("MOCK_ATTENDANCE_END", "2024-02-29")
MOCK_RANDOM_SEED = int(os.getenv("MOCK_RANDOM_SEED", "42"))
