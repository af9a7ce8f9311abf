# Third-party imports
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from voteschallenge.core.monitoring.logging import get_contextual_logger
from voteschallenge.db_selectors.voting import create_associate_in_db, get_associate_by_cpf
from voteschallenge.exceptions.voting import (
    AssociateAlreadyExistsError,
    AssociateNotFoundError,
    InvalidIdentityError,
    MissingInformationError,
)
from voteschallenge.models.voting import Associate
from voteschallenge.schemas.voting import AssociateCreate
from voteschallenge.utils.validators.cpf_validator import is_valid_cpf, normalize_cpf


async def register_associate(db: AsyncSession, associate_data: AssociateCreate) -> Associate:
    """
    Register an associate allowed to vote.

    The CPF is stored as digits only and must be unique.
    """
    if not associate_data.name or not associate_data.name.strip() or not associate_data.cpf:
        raise MissingInformationError("Name and CPF are required to register an associate.")

    if not is_valid_cpf(associate_data.cpf):
        raise InvalidIdentityError()

    cpf = normalize_cpf(associate_data.cpf)
    logger = get_contextual_logger(__name__, cpf=cpf)

    if await get_associate_by_cpf(db, cpf) is not None:
        raise AssociateAlreadyExistsError()

    associate = Associate(name=associate_data.name.strip(), cpf=cpf)
    try:
        associate = await create_associate_in_db(db, associate)
    except IntegrityError as e:
        # Registered concurrently between the lookup and the insert
        await db.rollback()
        logger.warning("Associate insert hit the unique CPF constraint")
        raise AssociateAlreadyExistsError() from e

    logger.info(f"Associate {associate.id} registered")
    return associate


async def find_associate_by_cpf(db: AsyncSession, cpf: str) -> Associate:
    if not is_valid_cpf(cpf):
        raise InvalidIdentityError()

    associate = await get_associate_by_cpf(db, normalize_cpf(cpf))
    if associate is None:
        raise AssociateNotFoundError()
    return associate
