#!/usr/bin/env python3
"""
Backend Starter
Starts the RSVP FastAPI backend with proper imports
"""

import uvicorn
import os
import sys

if __name__ == "__main__":
    # Ensure we're in the project root directory
    # (where this script is located)
    script_dir = os.path.dirname(os.path.abspath(__file__))
    os.chdir(script_dir)

    print(f"🚀 Starting RSVP API from: {script_dir}")
    print("📡 Server will be available at: http://localhost:8000")
    print("📄 API docs will be available at: http://localhost:8000/docs")

    uvicorn.run(
        "rsvp.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        reload="--reload" in sys.argv,
        reload_dirs=["./rsvp"],  # Only watch the package directory
    )
