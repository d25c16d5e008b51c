#!/usr/bin/env python3
"""
Wander Mode Backend - Run Script
This script starts the FastAPI backend server
"""

import os
import sys
import subprocess
from pathlib import Path

def print_colored(message, color="blue"):
    """Print colored output"""
    colors = {
        "red": "\033[91m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "blue": "\033[94m",
        "reset": "\033[0m"
    }
    print(f"{colors.get(color, '')}{message}{colors['reset']}")

def check_file_exists(filepath, error_message):
    """Check if a file exists"""
    if not Path(filepath).exists():
        print_colored(f"❌ Error: {error_message}", "red")
        sys.exit(1)

def main():
    print_colored("🚀 Starting Wander Mode Backend...", "blue")

    # Check if we're in the backend directory
    check_file_exists("app/main.py", "app/main.py not found. Please run this script from the backend directory.")

    # The key can come from .env or the process environment
    if not Path(".env").exists() and not Path("../.env").exists() and not os.environ.get("GOOGLE_KEY"):
        print_colored("⚠️  Warning: no .env file and GOOGLE_KEY is not set.", "yellow")
        print("Create a .env file in the project root with:")
        print("  GOOGLE_KEY=your_google_maps_key")
        print("  PORT=5000")
        print("/streetview and /places will answer 500 until the key is set.")
        print()

    # Check if dependencies are installed
    print_colored("🔍 Checking dependencies...", "blue")
    try:
        import fastapi  # noqa: F401
        import uvicorn  # noqa: F401
    except ImportError:
        print_colored("❌ Dependencies not installed.", "red")
        print("Install them from the project root:")
        print("  pip install -e .")
        sys.exit(1)

    # Same source as the app itself: environment first, then .env / ../.env
    from app.core.config import settings
    port = str(settings.PORT)
    host = settings.HOST

    print_colored("✅ All checks passed!", "green")
    print_colored("🌐 Starting Uvicorn server...", "blue")
    print(f"📍 Backend will be available at: http://localhost:{port}")
    print(f"📍 API Health check: http://localhost:{port}/health")
    print(f"📍 API Documentation: http://localhost:{port}/docs")
    print()
    print("Press Ctrl+C to stop the server")
    print()

    # Run uvicorn with auto-reload for development
    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "app.main:app",
            "--reload",
            "--host", host,
            "--port", port
        ], check=True)
    except KeyboardInterrupt:
        print_colored("\n👋 Backend server stopped.", "yellow")
    except subprocess.CalledProcessError as e:
        print_colored(f"\n❌ Error starting server: {e}", "red")
        sys.exit(1)

if __name__ == "__main__":
    main()
