# Jargs CLI Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for jargs output."""
from rich.console import Console

console = Console()
error_console = Console(stderr=True)
