from dataclasses import dataclass, field

from cinema_browser.config.settings import AppSettings
from cinema_browser.core.database import Database


@dataclass
class AppConfig:
    database: Database
    settings: AppSettings = field(default_factory=AppSettings)
    ui_title: str = "Cinema Browser"

    def validate(self) -> None:
        """Ensure the database has been attached before the app starts."""
        if self.database is None:
            raise RuntimeError("AppConfig.database must be initialized.")
