"""Identifier types shared by every entity schema."""

from __future__ import annotations

from typing import Annotated

from fastapi import Path
from pydantic import Field

# Identifiers are stored as signed 64-bit integers.
MAX_ID = 2**63 - 1

# Body identifiers must be real JSON integers; ``true`` is not ``1``.
BodyId = Annotated[int, Field(strict=True, ge=1, le=MAX_ID)]

# Path segments arrive as text, so only the range is enforced.
PathId = Annotated[int, Path(ge=1, le=MAX_ID)]
