"""
Client configuration module.
Loads environment variables and builds the network configuration handed to source providers.
"""
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings

# Get project root (two levels up from this file)
PROJECT_ROOT = Path(__file__).parent.parent.parent


class NetworkConfig(BaseModel):
    """
    Network endpoints and deployed contract identifiers.

    Built from Settings and passed explicitly to source provider constructors,
    so two providers in the same process can target different networks.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="Human-readable network name")
    horizon_url: str
    soroban_rpc_url: str
    passphrase: str
    friendbot_url: str | None = None

    vault_contract_id: str = Field(..., description="Vault contract (deposits, withdrawals, timelocks)")
    svt_token_id: str = Field(..., description="SVT reward token contract, minted by the vault on deposit")
    native_token_id: str = Field(..., description="Native XLM asset contract")
    vault_admin: str = Field(..., description="Admin / deployer public key")

    reward_rate_bps: int = Field(500, ge=0, le=10_000, description="Default reward rate (500 bps = 5%)")
    contract_deployed: bool = True


class Settings(BaseSettings):
    """
    Client settings loaded from environment variables or .env file.
    (Note: Environment variables take precedence over .env file)
    """
    # Network
    NETWORK_NAME: str = "Testnet"
    HORIZON_URL: str = "https://horizon-testnet.stellar.org"
    SOROBAN_RPC_URL: str = "https://soroban-testnet.stellar.org"
    NETWORK_PASSPHRASE: str = "Test SDF Network ; September 2015"
    FRIENDBOT_URL: str | None = "https://friendbot.stellar.org"

    # Deployed contracts
    VAULT_CONTRACT_ID: str = "CB4WTU6F45BHCEQBBBS7P5RXEFWD5ELMO3XTWEGDRVV3NS5DDZF6QBSN"
    SVT_TOKEN_ID: str = "CABSDKREP4SBIHCIAOPSL2O5DL575N44ZAAUNFXUV2YN7UYSOX5AONWX"
    NATIVE_TOKEN_ID: str = "CDLZFC3SYJYDZT7K67VZ75HPJVIEUVNIXF47ZG2FB2RMQQVU2HHGCYSC"
    VAULT_ADMIN: str = "GDHQ6TNWZ4V2JVCDWEUVW7YKFBXCOQZRRUCT27LAKES3PGOE6JSZMSMD"

    # Rewards
    REWARD_RATE_BPS: int = 500
    CONTRACT_DEPLOYED: bool = True

    # Source provider used by the CLI
    DEFAULT_SOURCE_PROVIDER: str = "static"

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = ConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        case_sensitive=True,
        env_file_encoding='utf-8'
        )

    def network_config(self) -> NetworkConfig:
        """Build the NetworkConfig passed to source providers."""
        return NetworkConfig(
            name=self.NETWORK_NAME,
            horizon_url=self.HORIZON_URL,
            soroban_rpc_url=self.SOROBAN_RPC_URL,
            passphrase=self.NETWORK_PASSPHRASE,
            friendbot_url=self.FRIENDBOT_URL,
            vault_contract_id=self.VAULT_CONTRACT_ID,
            svt_token_id=self.SVT_TOKEN_ID,
            native_token_id=self.NATIVE_TOKEN_ID,
            vault_admin=self.VAULT_ADMIN,
            reward_rate_bps=self.REWARD_RATE_BPS,
            contract_deployed=self.CONTRACT_DEPLOYED,
            )


def get_settings() -> Settings:
    """
    Get a fresh settings instance.

    Returns:
        Settings: Client settings
    """
    return Settings()
