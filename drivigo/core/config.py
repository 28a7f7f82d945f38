import os
from typing import List, Optional
from pydantic import validator
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

DEFAULT_CORS_ORIGINS = "http://localhost:5173,https://drivigo.in,https://drivigo-web-v2.vercel.app"

class Settings(BaseSettings):
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Drivigo Server")

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "5001"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    RAZORPAY_KEY_ID: str = os.getenv("RAZORPAY_KEY_ID", "")
    RAZORPAY_KEY_SECRET: str = os.getenv("RAZORPAY_KEY_SECRET", "")
    PROVIDER_TIMEOUT_SECONDS: float = float(os.getenv("PROVIDER_TIMEOUT_SECONDS", "15"))

    # Fixed order metadata attached to every Razorpay order
    ORDER_RECEIPT: str = os.getenv("ORDER_RECEIPT", "order_rcptid_11")
    ORDER_COURSE_NOTE: str = os.getenv("ORDER_COURSE_NOTE", "Master Gen-AI Development")

    SMTP_HOST: str = os.getenv("SMTP_HOST", "")
    SMTP_PORT: int = int(os.getenv("SMTP_PORT", "587"))
    SMTP_USER: str = os.getenv("SMTP_USER", "")
    SMTP_PASS: Optional[str] = os.getenv("SMTP_PASS")
    SMTP_TIMEOUT_SECONDS: float = float(os.getenv("SMTP_TIMEOUT_SECONDS", "30"))
    MAIL_FROM_NAME: str = os.getenv("MAIL_FROM_NAME", "Drivigo")

    # CORS, comma separated
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)

    @validator("CORS_ORIGINS", pre=True)
    def strip_cors_origins(cls, v: str) -> str:
        if not isinstance(v, str):
            raise ValueError(v)
        return v.strip()

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip().rstrip("/") for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    class Config:
        case_sensitive = True

settings = Settings()
