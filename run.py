"""Entry point for the User Directory API.

Equivalent to ``python -m user_directory_api``; kept at the project
root for process managers that expect a single script to run.

Usage:
    python run.py
"""
from user_directory_api.server import main


if __name__ == "__main__":
    main()
