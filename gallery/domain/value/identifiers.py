"""Strongly typed identifiers for Gallery domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
