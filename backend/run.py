#!/usr/bin/env python3
"""
Weather Gateway Backend - Run Script
This script starts the FastAPI backend server
"""

import os
import sys
import subprocess
import socket
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

def check_port_free(host, port):
    """Check that nothing is already listening on the port"""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.settimeout(2)
    result = sock.connect_ex((host, port))
    sock.close()
    return result != 0

def main():
    print_colored("🚀 Starting Weather Gateway...", "blue")
    
    # Check if we're in the backend directory
    check_file_exists("weather_gateway/main.py", "weather_gateway/main.py not found. Please run this script from the backend directory.")
    
    port = int(os.environ.get("PORT", "8000"))

    # .env is optional: every setting has a default
    if not Path(".env").exists() and not Path("../.env").exists():
        print_colored("ℹ️  No .env file found, using default settings.", "yellow")
        print("Optional variables:")
        print("  LOGGER=20")
        print("  WEATHER_API_URL=https://api.open-meteo.com/v1/forecast")
        print("  GEOCODING_API_URL=https://geocoding-api.open-meteo.com/v1/search")
        print("  PORT=8000")
    
    if not check_port_free("localhost", port):
        print_colored(f"❌ Port {port} is already in use.", "red")
        print("Stop the other process or set PORT to a free port.")
        sys.exit(1)
    
    # Check if virtual environment is activated
    if not os.environ.get('VIRTUAL_ENV'):
        print_colored("⚠️  Virtual environment not activated.", "yellow")
        print("Please activate your virtual environment first:")
        print("  source venv/bin/activate  # On macOS/Linux")
        print("  venv\\Scripts\\activate     # On Windows")
        sys.exit(1)
    
    # Check if dependencies are installed
    print_colored("🔍 Checking dependencies...", "blue")
    try:
        import fastapi
        import uvicorn
        import httpx
    except ImportError:
        print_colored("❌ Dependencies not installed.", "red")
        print("Installing dependencies...")
        subprocess.run([sys.executable, "-m", "pip", "install", "-e", ".."], check=True)
    
    # Start the server
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
            "weather_gateway.main:app",
            "--reload",
            "--host", "0.0.0.0",
            "--port", str(port)
        ], check=True)
    except KeyboardInterrupt:
        print_colored("\n👋 Backend server stopped.", "yellow")
    except subprocess.CalledProcessError as e:
        print_colored(f"\n❌ Error starting server: {e}", "red")
        sys.exit(1)

if __name__ == "__main__":
    main()
