"""Wizard directory: network-scoped wizards and the challenges between them.

Records live in a DocumentStore under two collections per network:
`wizards` keyed by `id` and `challenges` keyed by `challengeId`. Writes merge
field by field, so re-sending a record is idempotent and a partial record
only touches the fields it carries.
"""
import logging
from typing import Any, Iterable, Mapping

from app.models.network import Network, InvalidNetworkError
from app.store.base import DocumentStore

logger = logging.getLogger(__name__)

WIZARDS = 'wizards'
CHALLENGES = 'challenges'

CHALLENGE_KEYS = ('challengeId', 'challengingWizardId', 'otherWizardId')


class WizardDirectoryError(Exception):
    """Raised for malformed wizard or challenge input."""
    pass


class WizardDirectoryService:
    """Reads and writes wizard and challenge records for one store."""

    def __init__(self, store: DocumentStore):
        self.store = store

    # ── Wizards ───────────────────────────────────────────────────────────────

    async def upsert_wizards(
        self, network: str, records: Iterable[Mapping[str, Any]],
    ) -> None:
        """Merge each record into the network's wizards, keyed by `id`."""
        net = self._network(network)
        documents = []
        for record in records:
            wizard_id = record.get('id')
            if not isinstance(wizard_id, str) or not wizard_id:
                raise WizardDirectoryError(f'Wizard record has no valid id: {record!r}')
            documents.append((wizard_id, dict(record)))

        await self.store.merge_many(net.value, WIZARDS, documents)
        logger.info('Upserted %d wizards on %s', len(documents), net.value)

    async def get_all_wizards(self, network: str) -> list[dict]:
        net = self._network(network)
        return await self.store.query(net.value, WIZARDS)

    async def get_wizard(self, network: str, wizard_id: str) -> dict | None:
        net = self._network(network)
        return await self.store.get(net.value, WIZARDS, wizard_id)

    async def get_online_wizards(self, network: str) -> list[dict]:
        net = self._network(network)
        return await self.store.query(net.value, WIZARDS, {'online': True})

    async def get_wizards_by_owner(self, network: str, owner: str) -> list[dict]:
        """Wizards whose owner address matches exactly (case-sensitive)."""
        net = self._network(network)
        return await self.store.query(net.value, WIZARDS, {'owner': owner})

    # ── Challenges ────────────────────────────────────────────────────────────

    async def send_challenge(self, network: str, challenge: Mapping[str, Any]) -> dict:
        """Record a new, not yet accepted challenge between two wizards."""
        net = self._network(network)
        missing = [key for key in CHALLENGE_KEYS if not challenge.get(key)]
        if missing:
            raise WizardDirectoryError(f'Challenge is missing {", ".join(missing)}')

        document = {key: challenge[key] for key in CHALLENGE_KEYS}
        document['challengeAccepted'] = False

        await self.store.merge_many(
            net.value, CHALLENGES, [(document['challengeId'], document)],
        )
        logger.info(
            'Challenge %s sent on %s: %s -> %s',
            document['challengeId'], net.value,
            document['challengingWizardId'], document['otherWizardId'],
        )
        return document

    async def get_challenges_by_wizard(self, network: str, wizard_id: str) -> list[dict]:
        """Challenges the wizard issued or received, each listed once."""
        net = self._network(network)
        issued = await self.store.query(
            net.value, CHALLENGES, {'challengingWizardId': wizard_id},
        )
        received = await self.store.query(
            net.value, CHALLENGES, {'otherWizardId': wizard_id},
        )

        by_id = {c['challengeId']: c for c in issued + received}
        return [by_id[challenge_id] for challenge_id in sorted(by_id)]

    # ── Helpers ───────────────────────────────────────────────────────────────

    def _network(self, network: str) -> Network:
        try:
            return Network.parse(network)
        except InvalidNetworkError:
            logger.warning('Rejected unknown network %r', network)
            raise
