''' Tests for the in-memory continent database and its seed data '''

from threading import Thread

from continents.db import Database
from continents.model import Continent
from continents.seed import SEED_CONTINENTS, seeded_database

SEED_KEYS = ['asia', 'africa', 'north_america', 'south_america',
             'antarctica', 'europe', 'oceania']


class TestDatabase:

    def test_empty(self):
        database = Database()
        assert len(database) == 0
        assert database.get('asia') is None
        assert database.get_all() == []

    def test_put_then_get(self):
        database = Database()
        continent = Continent('zealandia', 4900000, 0)
        database.put('zealandia', continent)

        assert database.get('zealandia') == continent
        assert 'zealandia' in database
        assert len(database) == 1

    def test_put_overwrites(self):
        database = Database()
        database.put('asia', Continent('asia', 1, 1))
        database.put('asia', Continent('asia', 2, 2))

        assert database.get('asia') == Continent('asia', 2, 2)
        assert len(database) == 1

    def test_key_may_differ_from_name(self):
        database = Database()
        database.put('atlantis', Continent('mu', 1, 1))

        assert database.get('atlantis').name == 'mu'
        assert database.get('mu') is None

    def test_get_all_keeps_insertion_order(self):
        database = Database()
        for name in ['b', 'a', 'c']:
            database.put(name, Continent(name, 0, 0))

        assert [key for key, _ in database.get_all()] == ['b', 'a', 'c']

    def test_concurrent_puts(self):
        database = Database()

        def fill(offset):
            for i in range(200):
                name = f"c{offset + i}"
                database.put(name, Continent(name, i, i))

        threads = [Thread(target=fill, args=(n * 200,)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(database) == 800


class TestSeed:

    def test_seven_continents(self):
        database = seeded_database()
        assert len(database) == 7
        assert [key for key, _ in database.get_all()] == SEED_KEYS

    def test_keys_match_names(self):
        for key, continent in seeded_database().get_all():
            assert key == continent.name

    def test_seed_values(self):
        database = seeded_database()
        for continent in SEED_CONTINENTS:
            assert database.get(continent.name) == continent

    def test_databases_are_independent(self):
        first = seeded_database()
        second = seeded_database()
        first.put('zealandia', Continent('zealandia', 4900000, 0))

        assert 'zealandia' not in second
