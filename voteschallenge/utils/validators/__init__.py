# Local application imports
from voteschallenge.utils.validators.cpf_validator import generate_cpf, is_valid_cpf, mask_cpf, normalize_cpf

__all__ = ["generate_cpf", "is_valid_cpf", "mask_cpf", "normalize_cpf"]
