from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator


class Settings(BaseSettings):
    # Application Settings
    app_name: str = Field(default="Visitor Management System API", alias="APP_NAME")
    app_version: str = Field(default="1.0.0", alias="APP_VERSION")
    ENVIRONMENT: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=True, alias="DEBUG")

    # Server Configuration
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8000, alias="PORT")
    reload: bool = Field(default=True, alias="RELOAD")

    # Database Configuration
    DB_HOST: str = Field(default="localhost", alias="DB_HOST")
    DB_PORT: int = Field(default=5432, alias="DB_PORT")
    DB_NAME: str = Field(default="visitor_db", alias="DB_NAME")
    DB_USER: str = Field(default="visitor_user", alias="DB_USER")
    DB_PASSWORD: str = Field(default="visitor_password", alias="DB_PASSWORD")
    # DATABASE_URL wins whenever it is non-empty, and it defaults to a local SQLite file.
    # The DB_* values above are only used when DATABASE_URL is set to an empty string.
    database_url: str = Field(default="sqlite:///./visitor_management.db", alias="DATABASE_URL")

    # CORS Configuration
    API_CORS_ORIGINS: Optional[str] = Field(default=None, alias="API_CORS_ORIGINS")

    # Logging Configuration
    LOG_LEVEL: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s", alias="LOG_FORMAT")

    # Development Settings
    seed_database: bool = Field(default=False, alias="SEED_DATABASE")

    # Visitor Credentials
    otp_length: int = Field(default=6, ge=4, le=16, alias="OTP_LENGTH")
    credential_max_attempts: int = Field(default=20, ge=1, alias="CREDENTIAL_MAX_ATTEMPTS")

    # Twilio Configuration
    twilio_account_sid: Optional[str] = Field(default=None, alias="TWILIO_ACCOUNT_SID")
    twilio_auth_token: Optional[str] = Field(default=None, alias="TWILIO_AUTH_TOKEN")
    twilio_phone_number: Optional[str] = Field(default=None, alias="TWILIO_PHONE_NUMBER")
    twilio_custom_sender_id: Optional[str] = Field(default=None, alias="TWILIO_CUSTOM_SENDER_ID")
    twilio_messaging_service_sid: Optional[str] = Field(default=None, alias="TWILIO_MESSAGING_SERVICE_SID")
    twilio_enabled: bool = Field(default=False, alias="TWILIO_ENABLED")
    twilio_sms_enabled: bool = Field(default=True, alias="TWILIO_SMS_ENABLED")
    send_visitor_pass_sms: bool = Field(default=False, alias="SEND_VISITOR_PASS_SMS")
    default_country_code: str = Field(default="91", alias="DEFAULT_COUNTRY_CODE")

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator('default_country_code', mode='before')
    @classmethod
    def strip_country_code(cls, v):
        if isinstance(v, str):
            return v.strip().lstrip('+')
        return v

    @property
    def DATABASE_URL(self) -> str:
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def database_echo(self) -> bool:
        return self.debug and self.is_development

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
