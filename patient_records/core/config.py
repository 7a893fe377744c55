from pydantic_settings import BaseSettings
import os

class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Patient Records"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    TESTING: bool = os.getenv("TESTING", "0").lower() in ("1", "true", "t", "yes", "y")
    
    # Logging
    LOG_LEVEL: str = "INFO"
    
    # Raise PatientNotFoundError instead of ignoring writes for unknown patients
    STRICT_PATIENT_LOOKUPS: bool = False
    
    @property
    def log_level(self) -> str:
        """Return the effective log level, forcing DEBUG in debug mode."""
        if self.DEBUG:
            return "DEBUG"
        return self.LOG_LEVEL.upper()
    
    class Config:
        env_file = ".env"
        case_sensitive = True

# Create settings instance
settings = Settings()
