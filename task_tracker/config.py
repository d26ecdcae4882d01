import os
from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")

# Store backend: "supabase" or "memory"
TASK_STORE_BACKEND = os.getenv("TASK_STORE_BACKEND", "supabase")

# Supabase
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY")
TASKS_TABLE = os.getenv("TASKS_TABLE", "tasks")

# Client
API_URL = os.getenv("TASK_TRACKER_API_URL", "http://localhost:5000")
HTTP_TIMEOUT_SECONDS = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))

# UI timers (seconds)
TOAST_SECONDS = float(os.getenv("TOAST_SECONDS", "3"))
UNDO_SECONDS = float(os.getenv("UNDO_SECONDS", "5"))
CELEBRATION_SECONDS = float(os.getenv("CELEBRATION_SECONDS", "3"))
