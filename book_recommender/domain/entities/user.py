"""User entity for the book recommender."""

from pydantic import BaseModel, Field


class User(BaseModel):
    """A registered user.

    Only the hex encoded SHA-256 digest of the password is ever stored.
    """

    userid: str = Field(min_length=1, description="Unique user identifier")
    password_hash: str = Field(description="Hex encoded SHA-256 of the password")
    nome: str = Field(default="", description="First name")
    cognome: str = Field(default="", description="Last name")
    codice_fiscale: str = Field(default="", description="Italian fiscal code")
    email: str = Field(default="", description="Contact e-mail address")

    class Config:
        """Pydantic model configuration."""

        json_schema_extra = {
            "example": {
                "userid": "alice",
                "password_hash": "9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08",
                "nome": "Alice",
                "cognome": "Rossi",
                "codice_fiscale": "RSSLCA80A01H501U",
                "email": "alice@example.com",
            }
        }
