from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging konfiguration
    log_level: str = "INFO"
    log_file_path: str = ""  # Empty disables the rotating file handler
    log_retention_days: int = 30

    # Manifest fetching
    http_timeout_seconds: float = 30.0
    http_follow_redirects: bool = True

    # Mount subsystem
    gio_command: str = "gio"
    interactive_mount: bool = True  # Let gio prompt for credentials on the terminal

    # Success continuation
    open_viewer_on_success: bool = True
    viewer_command: str = "xdg-open"

    model_config = SettingsConfigDict(
        env_prefix="DAVMOUNT_",
        env_file="settings.env",
        extra="ignore",
    )

    @property
    def log_directory(self) -> Optional[Path]:
        """Returnerer log directory som Path objekt, eller None uden fil-logging"""
        if not self.log_file_path:
            return None
        return Path(self.log_file_path).parent
