# /tutorhub/core/config.py

"""
Central place for every environment-driven setting.

Values are read once at import time. A `.env` file in the working directory is
honoured for local development; real deployments set the variables directly.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# --- Database ---
# Defaults to a local SQLite file so the API can be started without Postgres.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./tutorhub.db")

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- HTTP ---
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# --- Reporting ---
# Name of the letter-grade table used for test results.
# One of the keys of `performance_summary.GRADE_SCALES`.
GRADE_SCALE = os.getenv("GRADE_SCALE", "teacher").lower()

# How many of a student's most recent test results feed the dashboard average.
RECENT_RESULTS_LIMIT = int(os.getenv("RECENT_RESULTS_LIMIT", "5"))

# Look-back window for the parent dashboard's homework completion figure.
HOMEWORK_WINDOW_DAYS = int(os.getenv("HOMEWORK_WINDOW_DAYS", "7"))
