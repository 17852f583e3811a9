import os
from dataclasses import dataclass

from .core.models import DEFAULT_COMMUNITY

@dataclass(frozen=True)
class Settings:
    token: str
    data_path: str = "wastewise_data.json"
    # When set, records are kept behind this HTTP API instead of data_path
    store_url: str = ""
    store_token: str = ""
    default_community: str = DEFAULT_COMMUNITY

def load_settings() -> Settings:
    token = os.getenv("DISCORD_BOT_TOKEN", "").strip()
    return Settings(
        token=token or "",
        data_path=os.getenv("WASTEWISE_DATA_PATH", "").strip() or "wastewise_data.json",
        store_url=os.getenv("WASTEWISE_STORE_URL", "").strip(),
        store_token=os.getenv("WASTEWISE_STORE_TOKEN", "").strip(),
        default_community=os.getenv("WASTEWISE_DEFAULT_COMMUNITY", "").strip()
        or DEFAULT_COMMUNITY,
    )
