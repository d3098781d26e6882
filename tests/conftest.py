''' Shared fixtures for the continents tests '''

import pytest

from continents.config import ServerConfig
from continents.seed import seeded_database
from continents.webserver import make_app

@pytest.fixture
def database():
    ''' A database holding the seven seed continents '''
    return seeded_database()

@pytest.fixture
def config():
    ''' Default server settings '''
    return ServerConfig(host='127.0.0.1', port=8080)

@pytest.fixture
def strict_config():
    ''' Settings with 404 for unknown continents and 400 for bad bodies '''
    return ServerConfig(host='127.0.0.1', port=8080,
        not_found_status=404, reject_malformed=True)

@pytest.fixture
async def client(aiohttp_client, database, config):
    ''' A test client for an app built around the seeded database '''
    return await aiohttp_client(make_app(database, config))

@pytest.fixture
async def strict_client(aiohttp_client, database, strict_config):
    ''' A test client for an app running with the strict settings '''
    return await aiohttp_client(make_app(database, strict_config))
