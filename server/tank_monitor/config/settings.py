"""Application configuration"""
import os

# Server settings
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ALLOW_ORIGINS = ["*"]

# Retention: 24 hours of readings at one reading every 5 seconds
SAMPLE_INTERVAL_SECONDS = 5
RETENTION_HOURS = 24
MAX_READINGS = RETENTION_HOURS * 3600 // SAMPLE_INTERVAL_SECONDS

# Default PID parameters handed to the tank controller
DEFAULT_SETPOINT = 50.0
DEFAULT_KP = 2.0
DEFAULT_KI = 0.1
DEFAULT_KD = 0.5
