from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Platform(str, Enum):
    WEB = "web"
    IOS = "ios"
    ANDROID = "android"

    def __str__(self) -> str:
        return self.value


class AttestationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    platform: Platform
    integrity_token: str = Field(alias="integrityToken")
    device_key: str = Field(alias="deviceKey")
    nonce: str


class SessionResponse(BaseModel):
    token: str
    trust_score: float = Field(alias="trustScore", ge=0.0, le=1.0)
    nullifier: str
    environment: str
    disclaimer: str


class HealthResponse(BaseModel):
    status: str
    environment: str
    disclaimer: str


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    error_code: str = Field(alias="errorCode")
    environment: str
