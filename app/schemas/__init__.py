# ruff: noqa: F403, F401
"""Schemas package initialization."""

from .base import *
from .conversation import *
from .message import *
from .settings import *
from .status import *
