#!/usr/bin/env python
"""
Seed a demo ruling with an open session and a few associates.

Prints the ids and CPFs so votes can be cast right away against the API.
"""

# Standard library imports
import argparse
import asyncio
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Local application imports
from voteschallenge.core.db import async_engine, run_with_new_session
from voteschallenge.schemas.voting import AssociateCreate, RulingCreate, SessionCreate
from voteschallenge.services.voting import create_ruling, open_session, register_associate
from voteschallenge.utils.validators import generate_cpf


async def seed(associates: int, duration: int) -> None:
    ruling = await run_with_new_session(
        create_ruling,
        RulingCreate(title="Approval of the annual report", description="Demo ruling"),
    )
    session = await run_with_new_session(open_session, SessionCreate(ruling_id=ruling.id, duration=duration))
    print(f"Ruling:  {ruling.id}")
    print(f"Session: {session.id} (open for {duration} minute(s))")

    for index in range(1, associates + 1):
        associate = await run_with_new_session(
            register_associate,
            AssociateCreate(name=f"Associate {index}", cpf=generate_cpf()),
        )
        print(f"Associate: {associate.name} - CPF {associate.cpf}")

    await async_engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--associates", type=int, default=3)
    parser.add_argument("--duration", type=int, default=10, help="session duration in minutes")
    args = parser.parse_args()
    asyncio.run(seed(args.associates, args.duration))
