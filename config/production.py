import os

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

# Prefer a precomputed werkzeug hash in production
MANAGER_PASSWORD = os.getenv("MANAGER_PASSWORD")
MANAGER_PASSWORD_HASH = os.getenv("MANAGER_PASSWORD_HASH")

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))
MOCK_ATTENDANCE_START = os.getenv("MOCK_ATTENDANCE_START", "2024-01-01")
MOCK_ATTENDANCE_END = os.getenv("MOCK_ATTENDANCE_END", "2024-02-29")
MOCK_RANDOM_SEED = None
