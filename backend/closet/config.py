"""
Configuration management for the Closet Log backend
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


"""Application settings and configuration"""
class Settings:

    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Database Configuration
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./closet.db")

    # Frontend URL (for CORS)
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:5173")
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "")

    # Local image storage (used when Cloudinary is off or unconfigured)
    STATIC_DIR: str = os.getenv("STATIC_DIR", "static")
    STATIC_URL_PREFIX: str = "/static"
    MAX_IMAGE_SIZE: int = int(os.getenv("MAX_IMAGE_SIZE", "10485760"))  # 10MB default

    # Cloudinary Configuration
    CLOUDINARY_CLOUD_NAME: str = os.getenv("CLOUDINARY_CLOUD_NAME", "")
    CLOUDINARY_API_KEY: str = os.getenv("CLOUDINARY_API_KEY", "")
    CLOUDINARY_API_SECRET: str = os.getenv("CLOUDINARY_API_SECRET", "")
    CLOUDINARY_FOLDER: str = os.getenv("CLOUDINARY_FOLDER", "closet_log")
    USE_CLOUDINARY: bool = _env_flag("USE_CLOUDINARY", "false")

    # Identity provider headers (set by the authenticating proxy)
    IDENTITY_HEADER: str = os.getenv("IDENTITY_HEADER", "X-User-Id")
    IDENTITY_EMAIL_HEADER: str = os.getenv("IDENTITY_EMAIL_HEADER", "X-User-Email")
    IDENTITY_FIRST_NAME_HEADER: str = os.getenv("IDENTITY_FIRST_NAME_HEADER", "X-User-First-Name")
    IDENTITY_LAST_NAME_HEADER: str = os.getenv("IDENTITY_LAST_NAME_HEADER", "X-User-Last-Name")
    IDENTITY_PROFILE_IMAGE_HEADER: str = os.getenv("IDENTITY_PROFILE_IMAGE_HEADER", "X-User-Profile-Image")

    # Wear log behaviour
    RECENT_WEAR_LOG_LIMIT: int = int(os.getenv("RECENT_WEAR_LOG_LIMIT", "10"))
    ENFORCE_WEAR_LOG_OWNERSHIP: bool = _env_flag("ENFORCE_WEAR_LOG_OWNERSHIP", "false")

    @property
    def database_url(self) -> str:
        """Normalized SQLAlchemy URL (Render/Heroku hand out postgres://)"""
        url = self.DATABASE_URL
        if url and url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql://", 1)
        return url

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() in ("development", "dev", "local")

    @property
    def allowed_origins(self) -> list:
        """Comma-separated CORS_ORIGINS if provided, otherwise FRONTEND_URL"""
        if self.CORS_ORIGINS:
            return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]
        return [self.FRONTEND_URL]

    """Check if Cloudinary is properly configured"""
    @property
    def cloudinary_configured(self) -> bool:
        return bool(
            self.CLOUDINARY_CLOUD_NAME
            and self.CLOUDINARY_API_KEY
            and self.CLOUDINARY_API_SECRET
        )

settings = Settings()
