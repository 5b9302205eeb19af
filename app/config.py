from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    DATABASE_URL: str
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    ENV: str = "local"  # Environment setting
    LOG_LEVEL: str = "INFO"

    # GraphQL endpoint mount point
    GRAPHQL_PATH: str = "/graphql"

    class Config:
        env_file = ".env"

settings = Settings()
