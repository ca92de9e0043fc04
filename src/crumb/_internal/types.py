"""Shared type aliases used across crumb modules."""

from collections.abc import Callable
from datetime import datetime
from typing import TypeAlias

# Time source — returns the current moment as an aware UTC datetime
Clock: TypeAlias = Callable[[], datetime]
