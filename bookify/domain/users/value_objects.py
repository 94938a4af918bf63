from pydantic import BaseModel, ConfigDict, Field, field_validator


class FirstName(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str = Field(..., min_length=1, max_length=100)


class LastName(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str = Field(..., min_length=1, max_length=100)


class Email(BaseModel):
    """Адрес электронной почты. Упрощенная проверка формата."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(..., min_length=3, max_length=320)

    @field_validator("value")
    @classmethod
    def _check_format(cls, v: str) -> str:
        local, at, domain = v.partition("@")
        if not at or not local or not domain or "@" in domain:
            raise ValueError("Некорректный формат email.")
        return v

    def __str__(self) -> str:
        return self.value
