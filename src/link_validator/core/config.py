from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ValidatorConfig(BaseModel):
    """
    Configuração de uma execução do validador.
    Criada uma vez antes da execução e nunca alterada (modelo congelado).
    """

    model_config = ConfigDict(frozen=True)

    # Página onde os links são descobertos
    source_url: str = Field(min_length=1)
    # id do <table> que contém os links
    table_id: str = Field(min_length=1)
    user_agent: str = Field(min_length=1)

    # Configurações de saída CSV
    csv_delimiter: str = ";"
    csv_quote: str = '"'

    # Liga mensagens de debug no logger (substitui a variável DEBUG=1)
    debug: bool = False

    @field_validator("source_url", "table_id", "user_agent")
    def must_not_be_blank(cls, v):
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()

    @field_validator("csv_delimiter", "csv_quote")
    def must_be_single_char(cls, v):
        if len(v) != 1:
            raise ValueError("must be a single character")
        return v

    def with_overrides(self, **overrides: Any) -> "ValidatorConfig":
        """Return a copy with every non-None override applied.

        The copy goes through validation again, so blank overrides are
        rejected the same way as in the constructor.
        """
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return ValidatorConfig(**values)


DEFAULT_CONFIG = ValidatorConfig(
    source_url="https://gest-hamburg.de/stadtteilschulen/",
    table_id="tablepress-stadtteilschulen",
    user_agent="Mozilla/5.0 (compatible; GESTBot/1.0; +https://gest-hamburg.de/)",
)
