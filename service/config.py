from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for Detective Quest."""

    repo_root: Path = Path(__file__).resolve().parent.parent
    cases_dir: str = "cases"
    schemas_dir: str = "schemas"
    default_case: str = "mansion"
    verdict_threshold: int = 2
    hash_buckets: int = 103
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="DETECTIVE_QUEST_")

    @property
    def cases_path(self) -> Path:
        return self.repo_root / self.cases_dir

    @property
    def schemas_path(self) -> Path:
        return self.repo_root / self.schemas_dir

    @property
    def case_schema_path(self) -> Path:
        return self.schemas_path / "case.schema.json"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
