''' The continents every server starts out with '''

from .db import Database
from .model import Continent

SEED_CONTINENTS = (
    Continent('asia', 44579000, 4641054775),
    Continent('africa', 30370000, 1340598147),
    Continent('north_america', 24709000, 592072212),
    Continent('south_america', 17840000, 430759766),
    Continent('antarctica', 14200000, 0),
    Continent('europe', 10180000, 747636026),
    Continent('oceania', 8525989, 43111704),
)

def seeded_database() -> Database:
    ''' Create a database holding the seven seed continents '''

    database = Database()
    for continent in SEED_CONTINENTS:
        database.put(continent.name, continent)

    return database
