"""Shared path parameter types."""

from typing import Annotated

from fastapi import Path

from models import ID_LENGTH

EntityIdPath = Annotated[str, Path(min_length=ID_LENGTH, max_length=ID_LENGTH)]
