from pydantic import BaseModel, ConfigDict, Field


class OAuthCredentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    client_id: str = Field(..., min_length=1)
    client_secret: str = Field(..., min_length=1)
    redirect_uris: tuple[str, ...] = Field(..., min_length=1)

    @property
    def redirect_uri(self) -> str:
        """The default redirect URI (first entry)."""
        return self.redirect_uris[0]


class ClientCredentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    client_id: str
    client_secret: str


# Shapes accepted in the keys file


class InstalledAppCredentials(BaseModel):
    """The "installed" block of a keys file downloaded from Google Cloud."""

    client_id: str = Field(..., min_length=1)
    client_secret: str = Field(..., min_length=1)
    redirect_uris: list[str] = Field(default_factory=list)
    # auth_uri, token_uri, project_id, ... are ignored


class DirectCredentials(BaseModel):
    """Hand-written keys file with the client fields at the top level."""

    client_id: str = Field(..., min_length=1)
    client_secret: str = Field(..., min_length=1)
    redirect_uris: list[str] = Field(default_factory=list)
