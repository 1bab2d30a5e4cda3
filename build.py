"""
Build script for creating a standalone executable using PyInstaller.

This script bundles the CLI application and its dependencies into a single
executable file named after the application.
"""

import PyInstaller.__main__  # type: ignore

from constants import APP_NAME

PyInstaller.__main__.run(["main.py", "--onefile", f"--name={APP_NAME}"])
