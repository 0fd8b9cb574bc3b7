from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Token Gateway API"
    API_PREFIX: str = "/api"

    # Ephemery testnet node and the ERC-20 token deployed there
    RPC_URL: str = "https://otter.bordel.wtf/erigon"
    TOKEN_ADDRESS: str = "0x68E1Acf6b9f56267adDf65e1249B6aE321c0560E"
    RPC_TIMEOUT: float = 10.0
    BLOCK_IDENTIFIER: str = "latest"
    ABI_PATH: Optional[str] = None

    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # This configures Pydantic to read variables from the ".env" file
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)


settings = Settings()
