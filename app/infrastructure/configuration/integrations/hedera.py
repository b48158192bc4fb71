"""Hedera ledger integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class HederaSettings(IntegrationSettings):
    """Hedera network and operator configuration.

    The operator identity is the account/key pair that pays for and signs
    ledger operations. Ledger clients are built from these values by the
    caller and handed to the executor fully configured.

    Environment Variables:
        HEDERA_NETWORK: Network name - 'testnet', 'previewnet' or 'mainnet'
        HEDERA_ACCOUNT_ID: Operator account ID (0.0.XXXXXX)
        HEDERA_PRIVATE_KEY: Operator private key

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if not settings.hedera.has_operator:
            raise SystemExit("HEDERA_ACCOUNT_ID / HEDERA_PRIVATE_KEY not set")
        ```
    """

    NETWORK: str = Field(default="testnet", alias="HEDERA_NETWORK")
    ACCOUNT_ID: str = Field(default="", alias="HEDERA_ACCOUNT_ID")
    PRIVATE_KEY: str = Field(default="", alias="HEDERA_PRIVATE_KEY")

    @property
    def has_operator(self) -> bool:
        """Whether both halves of the operator identity are configured."""
        return bool(self.ACCOUNT_ID and self.PRIVATE_KEY)
