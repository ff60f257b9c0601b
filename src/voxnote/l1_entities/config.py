"""Configuration Pydantic models -- pure schema, no infrastructure defaults."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ProviderKind(str, Enum):
    CLOUD = 'cloud'
    LOCAL = 'local'


class CloudProviderConfig(BaseModel):
    enabled: bool
    api_key: str
    model: str

    @property
    def bearer_token(self) -> str:
        """API key with every whitespace character removed."""
        return ''.join(self.api_key.split())


class LocalProviderConfig(BaseModel):
    enabled: bool
    model_path: str
    model_downloaded: bool


class ProviderConfig(BaseModel):
    provider: ProviderKind
    cloud: CloudProviderConfig
    local: LocalProviderConfig


class DispatchConfig(BaseModel):
    max_workers: int = Field(ge=1)
    max_pending: int = Field(ge=0)


class AppConfig(BaseModel):
    providers: ProviderConfig
    dispatch: DispatchConfig
