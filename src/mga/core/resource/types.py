"""Named value types for resource management."""

from __future__ import annotations

from typing import NewType

Name = NewType("Name", str)
Description = NewType("Description", str)
Tag = NewType("Tag", str)
Message = NewType("Message", str)
ID = NewType("ID", str)
Status = NewType("Status", str)
Pattern = NewType("Pattern", str)
"""Comma-separated glob patterns matched against resource names."""
Limit = NewType("Limit", int)
"""Maximum number of results; ``0`` means unlimited."""
Offset = NewType("Offset", int)
SortField = NewType("SortField", str)

STATUS_ACTIVE = Status("active")
STATUS_INACTIVE = Status("inactive")
STATUS_PENDING = Status("pending")
