from typing import Any

from pydantic import BaseModel, StrictStr, model_validator


class CepRequest(BaseModel):
    cep: StrictStr = ""

    @model_validator(mode="before")
    @classmethod
    def _match_cep_key(cls, data: Any) -> Any:
        """Accept any casing of the key ("CEP", "Cep"); the last matching key wins."""
        if not isinstance(data, dict):
            return data
        matched = {key: value for key, value in data.items() if key.casefold() != "cep"}
        for key, value in data.items():
            if key.casefold() == "cep":
                matched["cep"] = value
        return matched
