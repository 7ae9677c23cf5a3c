from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_env: str = "dev"
    log_level: str = "INFO"
    root_path: str = ""
    # Browser origins allowed to call the API with the session cookie.
    cors_origins: list[str] = ["http://localhost:3000"]

    auth_mode: str = "session"  # session | forwardauth
    session_secret: str = ""
    session_algorithm: str = "HS256"
    session_cookie_name: str = "session-token"

    postgres_db: str = "family_finance"
    postgres_user: str = "finance_user"
    postgres_password: str = "finance_pass"
    postgres_host: str = "db"
    postgres_port: int = 5432
    database_url_override: str | None = Field(default=None, validation_alias="DATABASE_URL")
    database_url_ddl_override: str | None = Field(default=None, validation_alias="DATABASE_URL_DDL")

    schema_mode: str = "verify"  # verify | create

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def database_url_ddl(self) -> str:
        return self.database_url_ddl_override or self.database_url

    @property
    def session_cookie_names(self) -> tuple[str, str]:
        # Behind HTTPS the identity provider issues the __Secure- prefixed cookie.
        return (f"__Secure-{self.session_cookie_name}", self.session_cookie_name)


settings = Settings()
