from pydantic_settings import BaseSettings

class AppInfoSettings(BaseSettings):
    TITLE: str = "Organization Image Srcset Service"
    DESCRIPTION: str = "Responsive srcset descriptors from Siren organization images."
    VERSION: str = "1.0.0"

class ServerSettings(BaseSettings):
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False

class AppSettings(BaseSettings):
    APP: AppInfoSettings = AppInfoSettings()
    SERVER: ServerSettings = ServerSettings()

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = AppSettings()
