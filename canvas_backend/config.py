import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


@dataclass(frozen=True)
class AppConfig:
    data_dir: Path
    port: int = 3000
    host: str = "0.0.0.0"
    log_level: str = "info"

    @property
    def files_dir(self) -> Path:
        return self.data_dir / "file"

    @property
    def canvas_dir(self) -> Path:
        return self.data_dir / "canvas"


def load_config() -> AppConfig:
    load_dotenv()
    raw_port = os.getenv("PORT", "3000")
    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw_port!r}") from None
    return AppConfig(
        data_dir=Path(os.getenv("DATA_DIR", ".")),
        port=port,
        host=os.getenv("HOST", "0.0.0.0"),
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )
