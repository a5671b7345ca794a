"""
Configuration Management
========================

Type-safe configuration using Pydantic Settings with environment variable support.
"""

from pathlib import Path
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import logging


class PathsConfig(BaseSettings):
    """File locations used by the demo programs"""
    model_config = SettingsConfigDict(
        env_prefix="RECORDKEEPER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    data_dir: Path = Field(Path("data"), description="Directory holding input and output files")
    learners_file: str = Field("learners.txt", description="Learner scores input file")
    grade_report_file: str = Field("grade_report.txt", description="Grade report output file")
    stock_file: str = Field("stock.json", description="Stock log JSON file")

    def resolve(self, file_name: str) -> Path:
        """Resolve a file name against the data directory unless it is absolute"""
        path = Path(file_name)
        if path.is_absolute():
            return path
        return self.data_dir / path

    @property
    def learners_path(self) -> Path:
        return self.resolve(self.learners_file)

    @property
    def grade_report_path(self) -> Path:
        return self.resolve(self.grade_report_file)

    @property
    def stock_path(self) -> Path:
        return self.resolve(self.stock_file)


class FormattingConfig(BaseSettings):
    """Console formatting configuration"""
    model_config = SettingsConfigDict(
        env_prefix="FORMAT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    currency_symbol: str = Field("$", description="Symbol prefixed to amounts")
    date_format: str = Field("%Y-%m-%d", description="strftime format for dates")


class LoggingConfig(BaseSettings):
    """Logging configuration"""
    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    level: str = Field("INFO", description="Logging level")
    format: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string"
    )

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate that the level is known to the logging module"""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level: {v}")
        return level


class Settings(BaseSettings):
    """Main application settings"""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True
    )

    environment: str = Field("development", description="Environment name")

    paths: PathsConfig = Field(default_factory=PathsConfig, description="File locations")
    formatting: FormattingConfig = Field(default_factory=FormattingConfig, description="Formatting configuration")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")


def get_config() -> Settings:
    """Get application configuration"""
    return Settings()
