from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    PROJECT_NAME: str = "CGPA Tracker"
    API_V1_STR: str = "/api"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # 数据库
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_HOST: str = "localhost"
    DB_PORT: str = "3306"
    DB_NAME: str = "cgpa"

    # 设置后覆盖上面的 MySQL 连接，如 sqlite:///./cgpa.db
    DATABASE_URI: str = ""

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URI:
            return self.DATABASE_URI
        return f"mysql+mysqlconnector://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

settings = Settings()
