from pydantic_settings import BaseSettings
from typing import Optional

class Settings(BaseSettings):
    # Node
    RPC_URL: str = "http://localhost:8545"

    # Contract artifacts (Foundry broadcast + build output)
    CONTRACT_NAME: str = "Dexterity"
    DEPLOYMENT_MANIFEST_PATH: str = "contracts/broadcast/DepositsAndSwaps.s.sol/1/run-latest.json"
    CONTRACT_ARTIFACT_PATH: str = "contracts/out/Dexterity.sol/Dexterity.json"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Application
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    ALLOWED_ORIGINS: list = ["http://localhost:3000", "http://localhost:5173"]
    EXPOSE_ERROR_DETAILS: bool = False  # include str(exc) in 500 bodies

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
