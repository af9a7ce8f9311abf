# Standard library imports
from datetime import datetime
import uuid

# Third-party imports
from sqlalchemy import TIMESTAMP, Uuid, text
from sqlalchemy.orm import Mapped, mapped_column

# Local application imports
from voteschallenge.utils.date_utils import now_utc


class UUIDTimeStampMixin:
    """A reusable mixin that:
    - Provides a UUID primary key named 'id'
    - Includes created_at and updated_at timestamps, set from the application clock in UTC

    ``created_at`` is filled on the Python side so a freshly created voting session
    knows its opening instant without a round trip to the database.
    """

    __abstract__ = True

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)

    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=now_utc,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=now_utc,
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=now_utc,
    )
