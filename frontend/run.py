#!/usr/bin/env python3
"""
Wander Mode Frontend - Run Script
This script starts the Streamlit frontend
"""

import sys
import subprocess
from pathlib import Path

from wander_client.api import BackendClient, BACKEND_URL

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

def main():
    print_colored("🚀 Starting Wander Mode Frontend...", "blue")

    if not Path("streamlit_app.py").exists():
        print_colored("❌ Error: streamlit_app.py not found. Please run this script from the frontend directory.", "red")
        sys.exit(1)

    # Check if backend is running
    print_colored("🔍 Checking backend connection...", "blue")
    if not BackendClient(timeout=2).health():
        print_colored(f"⚠️  Warning: Backend doesn't appear to be running at {BACKEND_URL}", "yellow")
        print("Please start the backend first:")
        print("  cd backend && python run.py")
        print()
        response = input("Continue anyway? (y/N): ").strip().lower()
        if response != 'y':
            sys.exit(1)

    print_colored("✅ All checks passed!", "green")
    print_colored("🌐 Starting Streamlit server...", "blue")
    print("📍 Frontend will be available at: http://localhost:8501")
    print()
    print("Press Ctrl+C to stop the server")
    print()

    try:
        subprocess.run([
            sys.executable, "-m", "streamlit",
            "run", "streamlit_app.py"
        ], check=True)
    except KeyboardInterrupt:
        print_colored("\n👋 Frontend server stopped.", "yellow")
    except subprocess.CalledProcessError as e:
        print_colored(f"\n❌ Error starting server: {e}", "red")
        sys.exit(1)

if __name__ == "__main__":
    main()
