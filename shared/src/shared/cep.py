"""CEP (Brazilian postal code) validation shared by both hops."""
from shared.errors import ValidationError

CEP_LENGTH = 8


def validate_cep(cep: str | None) -> str:
    """Return ``cep`` if it has exactly 8 characters, else raise ValidationError.

    Only the length is checked; non-digit characters pass.
    """
    if cep is None or len(cep) != CEP_LENGTH:
        raise ValidationError()
    return cep
