from __future__ import annotations

from dataclasses import dataclass

from tikdl.config import Settings
from .api_client import ApiClient


@dataclass
class BotContext:
    settings: Settings
    api: ApiClient
    started_at: float
