import seed
from app.services.wizard_directory_service import WizardDirectoryService


async def test_seed_loads_sample_data(memory_store):
    svc = WizardDirectoryService(memory_store)

    await seed.seed(svc, 'mainnet')
    # Seeding twice leaves the same state
    await seed.seed(svc, 'mainnet')

    wizards = await svc.get_all_wizards('mainnet')
    assert sorted(w['id'] for w in wizards) == sorted(w['id'] for w in seed.SAMPLE_WIZARDS)

    owned = await svc.get_wizards_by_owner('mainnet', seed.OWNER_ALICE)
    assert len(owned) == 2

    challenges = await svc.get_challenges_by_wizard('mainnet', '6208')
    assert len(challenges) == 1
    assert challenges[0]['challengeAccepted'] is False
