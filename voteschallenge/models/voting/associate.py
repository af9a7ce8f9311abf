# Third-party imports
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, validates

# Local application imports
from voteschallenge.models.base import Base
from voteschallenge.models.mixins.uuid_timestamp import UUIDTimeStampMixin
from voteschallenge.utils.validators.cpf_validator import is_valid_cpf, normalize_cpf


class Associate(UUIDTimeStampMixin, Base):
    __tablename__ = "associates"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    cpf: Mapped[str] = mapped_column(
        String(11),
        unique=True,
        index=True,
        nullable=False,
        comment="CPF stored as 11 digits, no punctuation",
    )

    @validates("cpf")
    def validate_cpf(self, key: str, value: str) -> str:
        """
        Normalize the CPF to digits and reject numbers failing the check digits.
        """
        if not is_valid_cpf(value):
            raise ValueError("Invalid CPF")
        return normalize_cpf(value)

    def __str__(self) -> str:
        return f"Associate: {self.name} - {self.cpf}"
