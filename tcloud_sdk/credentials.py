"""
API credentials.

Only the secret id is ever shown in diagnostics; the secret key is kept as a
``SecretStr`` and left out of ``repr()``/``str()``.
"""

from pydantic import BaseModel, Field, SecretStr, field_validator


class Credentials(BaseModel):
    """
    Tencent Cloud secret id/key pair.

    Get both values from the Tencent Cloud console (API key management).

    Example:
        ```python
        credentials = Credentials(secret_id="AKID...", secret_key="...")
        print(credentials)  # secret_id='AKID...'
        ```
    """

    secret_id: str = Field(..., min_length=1)
    secret_key: SecretStr = Field(..., repr=False)

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value():
            raise ValueError("secret_key must not be empty")
        return v

    model_config = {
        "frozen": True,
    }
