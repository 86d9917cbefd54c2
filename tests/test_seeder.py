"""
Tests for the sample campaign seeder.
"""

from worldsmith.database_seeder import seed_database
from worldsmith.models import Character, Creature, Location, LoreEntry, Region, Spell, User, World


class TestSeeder:
    def test_seeds_sample_campaign(self, db_session):
        seed_database(db_session)

        assert db_session.query(User).count() == 1
        assert [w.name for w in db_session.query(World).all()] == ["Eldoria"]
        assert db_session.query(Region).count() == 2
        assert db_session.query(Location).count() == 2
        assert db_session.query(Character).count() == 2
        assert db_session.query(Creature).count() == 2
        assert db_session.query(Spell).count() == 2
        assert db_session.query(LoreEntry).count() == 2

        thornwall = db_session.query(Spell).filter_by(name="Thornwall").one()
        assert thornwall.creator.name == "Elara Moonwhisper"

    def test_is_idempotent(self, db_session):
        seed_database(db_session)
        seed_database(db_session)

        assert db_session.query(World).count() == 1
        assert db_session.query(Creature).count() == 2

    def test_seeded_data_through_api(self, client, session_factory):
        db = session_factory()
        try:
            seed_database(db)
        finally:
            db.close()

        world = client.get("/api/worlds").json()[0]
        creatures = client.get(f"/api/worlds/{world['id']}/creatures", params={"search": "dragon"}).json()
        assert [c["name"] for c in creatures] == ["Young Red Dragon"]
