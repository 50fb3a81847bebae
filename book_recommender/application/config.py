"""Application configuration using Pydantic Settings."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables (``BOOKREC_*``)."""

    model_config = SettingsConfigDict(
        env_prefix="BOOKREC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Data files, resolved under data_dir
    data_dir: Path = Path("data")
    books_file: str = "Libri.dati"
    books_csv_file: str = "BooksDatasetClean.csv"
    users_file: str = "UtentiRegistrati.dati"
    libraries_file: str = "Librerie.dati"
    reviews_file: str = "ValutazioniLibri.dati"
    suggestions_file: str = "ConsigliLibri.dati"

    # Logging
    log_level: str = "INFO"

    # CLI
    search_result_limit: int = 20

    @property
    def books_path(self) -> Path:
        return self.data_dir / self.books_file

    @property
    def books_csv_path(self) -> Path:
        return self.data_dir / self.books_csv_file

    @property
    def users_path(self) -> Path:
        return self.data_dir / self.users_file

    @property
    def libraries_path(self) -> Path:
        return self.data_dir / self.libraries_file

    @property
    def reviews_path(self) -> Path:
        return self.data_dir / self.reviews_file

    @property
    def suggestions_path(self) -> Path:
        return self.data_dir / self.suggestions_file


# Create a singleton instance
settings = Settings()
