import logging
from typing import Literal, Optional, Union

from azure.identity.aio import AzureCliCredential, ClientSecretCredential, ManagedIdentityCredential
from msgraph import GraphServiceClient
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    enable_tracing: bool = Field(default=False, description="Export OpenTelemetry spans to the console")

    directory_provider: Literal["mock", "azure"] = Field(
        default="mock", description="Directory backend (mock, azure)"
    )

    azure_tenant_id: str = Field(default="", description="Entra ID tenant ID for Graph access")
    azure_client_id: str = Field(default="", description="App registration or managed identity client ID")
    azure_client_secret: str = Field(default="", description="App registration client secret")
    azure_auth_mode: Literal["azure_cli", "managed_identity", "client_secret"] = Field(
        default="azure_cli", description="Credential used to reach Microsoft Graph"
    )

    throttle_delay_seconds: int = Field(
        default=1, ge=0, description="Delay before each license removal call"
    )
    graph_page_size: int = Field(default=999, ge=1, le=999, description="Users requested per Graph page")


_settings_instance: Optional[Settings] = None

_graph_client: Optional[GraphServiceClient] = None
_graph_credential: Optional[
    Union[AzureCliCredential, ManagedIdentityCredential, ClientSecretCredential]
] = None

logger = logging.getLogger(__name__)

GRAPH_SCOPES = ["https://graph.microsoft.com/.default"]


def get_settings() -> Settings:
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings_instance
    _settings_instance = None


def _build_credential(settings: Settings):
    if settings.azure_auth_mode == "managed_identity":
        credential = ManagedIdentityCredential(client_id=settings.azure_client_id or None)
        logger.info("Initialized ManagedIdentityCredential for Microsoft Graph")
    elif settings.azure_auth_mode == "client_secret":
        if not (settings.azure_tenant_id and settings.azure_client_id and settings.azure_client_secret):
            raise ValueError(
                "AZURE_TENANT_ID, AZURE_CLIENT_ID and AZURE_CLIENT_SECRET are required for client_secret auth"
            )
        credential = ClientSecretCredential(
            tenant_id=settings.azure_tenant_id,
            client_id=settings.azure_client_id,
            client_secret=settings.azure_client_secret,
        )
        logger.info("Initialized ClientSecretCredential for Microsoft Graph")
    else:
        credential = AzureCliCredential(tenant_id=settings.azure_tenant_id or None)
        logger.info("Initialized AzureCliCredential for Microsoft Graph")
    return credential


async def get_graph_client() -> Optional[GraphServiceClient]:
    """Create or reuse a Microsoft Graph client based on configuration."""
    global _graph_client, _graph_credential

    settings = get_settings()
    if settings.directory_provider != "azure":
        return None

    if _graph_client is not None:
        return _graph_client

    credential = _build_credential(settings)
    _graph_credential = credential
    _graph_client = GraphServiceClient(credentials=credential, scopes=GRAPH_SCOPES)

    return _graph_client


async def close_graph_client() -> None:
    """Dispose the cached Graph credential when shutting down."""
    global _graph_client, _graph_credential

    if _graph_credential is not None:
        await _graph_credential.close()

    _graph_client = None
    _graph_credential = None
