"""Seed script: load sample wizards and a challenge into one network.

Usage:
    python seed.py            # rinkeby
    python seed.py mainnet

Uses the store selected by STORE_BACKEND (see app/config.py).
"""
import asyncio
import sys

from app.config import settings
from app.db.database import init_db
from app.services.wizard_directory_service import WizardDirectoryService
from app.store import create_store


OWNER_ALICE = '0x12D062B19a2DF1920eb9FC28Bd6E9A7E936de4c2'
OWNER_BOB = '0xA1b02d8c67b0FDCF4E379855868DeB470E169401'

# Sample wizards to create
SAMPLE_WIZARDS = [
    {
        'id': '293',
        'owner': OWNER_ALICE,
        'affinity': 2,
        'power': 110_000_000_000_000,
        'maxPower': 110_000_000_000_000,
        'ascending': False,
        'ascensionOpponent': 0,
        'molded': False,
        'nonce': 0,
        'online': True,
        'ready': True,
    },
    {
        'id': '3117',
        'owner': OWNER_ALICE,
        'affinity': 4,
        'power': 98_000_000_000_000,
        'maxPower': 98_000_000_000_000,
        'ascending': False,
        'ascensionOpponent': 0,
        'molded': False,
        'nonce': 2,
        'online': True,
        'ready': False,
    },
    {
        'id': '6208',
        'owner': OWNER_BOB,
        'affinity': 3,
        'power': 125_038_910_370_365,
        'maxPower': 125_038_910_370_365,
        'ascending': False,
        'ascensionOpponent': 0,
        'molded': False,
        'nonce': 0,
        'online': True,
        'ready': True,
    },
]

SAMPLE_CHALLENGE = {
    'challengeId': '_mXpQaaF',
    'challengingWizardId': '293',
    'otherWizardId': '6208',
}


async def seed(svc: WizardDirectoryService, network: str):
    """Upsert the sample wizards and send the sample challenge."""
    await svc.upsert_wizards(network, SAMPLE_WIZARDS)
    print(f'✓ {len(SAMPLE_WIZARDS)} wizards upserted on {network}')

    await svc.send_challenge(network, SAMPLE_CHALLENGE)
    print(f'✓ Challenge {SAMPLE_CHALLENGE["challengeId"]} sent')


async def main(network: str):
    if settings.store_backend == 'sql':
        await init_db()
    store = create_store(settings)
    try:
        await seed(WizardDirectoryService(store), network)
    finally:
        await store.close()


if __name__ == '__main__':
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else 'rinkeby'))
