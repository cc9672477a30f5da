"""wwt -- what was that? Find commands by describing them."""

from wwt.client import WhatWasThat
from wwt.config import WwtConfig
from wwt.core.types import Match, Record

__version__ = "0.1.0"
__all__ = ["WhatWasThat", "WwtConfig", "Match", "Record"]
