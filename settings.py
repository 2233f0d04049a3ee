# settings.py
# Environment-driven configuration shared by the bot client and the agent server.

import os

# Game server (bot client)
CYCLES_HOST = os.getenv("CYCLES_HOST", "localhost")
CYCLES_PORT = int(os.getenv("CYCLES_PORT", "3101"))
CYCLES_SERVER_URL = os.getenv("CYCLES_SERVER_URL", f"http://{CYCLES_HOST}:{CYCLES_PORT}")
CYCLES_TIMEOUT = float(os.getenv("CYCLES_TIMEOUT", "1.0"))  # seconds; connect timeout only for /state

# Agent server identity
PARTICIPANT = os.getenv("PARTICIPANT", "SampleParticipant")
AGENT_NAME = os.getenv("AGENT_NAME", "FloodFillBot")
PORT = int(os.getenv("PORT", "5008"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
