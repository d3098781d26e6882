''' HTTP interface to the continent database '''

import asyncio
import logging

from html import escape

from aiohttp import web

from .config import ServerConfig
from .constants import RESOURCE_PREFIX, JSON_CONTENT_TYPE, TEXT_CONTENT_TYPE
from .db import Database
from .model import ContinentDecodeError, decode_continent, encode_continent
from .seed import seeded_database

DATABASE = web.AppKey("database", Database)
CONFIG = web.AppKey("config", ServerConfig)

def _json_response(payload: str, status: int) -> web.Response:
    return web.Response(body=payload.encode('utf-8'), status=status,
            headers={'Content-Type': JSON_CONTENT_TYPE})

async def handle_default(request):
    ''' Handle a request to the main page '''

    entries = request.app[DATABASE].get_all()
    text = "<html><head>\n"
    text += "<title>Continents</title>\n"
    text += "</head><body>\n"

    if len(entries) == 0:
        text += "Found no continents in the database."
    else:
        text += "Found the following continents: <br />\n"
        text += "<ul>\n"
        for key, continent in entries:
            text += (f"<li>{escape(key)}: area {continent.area} km&sup2;, "
                     f"population {continent.population}</li>\n")
        text += "</ul>\n"
    text += "</body></html>"

    return web.Response(text=text, content_type="text/html")

async def handle_get(request):
    ''' Fetches a continent from the database (if it exists) '''

    # The key is the raw path segment, percent-escapes and all
    key = request.rel_url.raw_path[len(RESOURCE_PREFIX):]
    continent = request.app[DATABASE].get(key)

    if continent is None:
        logging.info('Continent "%s" not found', key)
        return web.Response(body=f"Continent {key} not found.".encode('utf-8'),
                status=request.app[CONFIG].not_found_status,
                headers={'Content-Type': TEXT_CONTENT_TYPE})

    return _json_response(encode_continent(continent), 200)

async def handle_put(request):
    ''' Stores a new continent in the database or replaces an existing one '''

    try:
        continent = decode_continent(await request.read())
    except ContinentDecodeError as err:
        if not request.app[CONFIG].reject_malformed:
            raise
        logging.info("Rejected malformed continent: %s", err)
        raise web.HTTPBadRequest(text=str(err)) from err

    # The name in the body decides where the continent goes, not the path
    request.app[DATABASE].put(continent.name, continent)
    logging.info('Stored continent "%s"', continent.name)

    return _json_response(encode_continent(continent), 201)

def make_app(database: Database|None = None, config: ServerConfig|None = None) -> web.Application:
    ''' Build the web application around a database

    A database holding the seed continents is created if none is passed in.
    '''

    if config is None:
        config = ServerConfig()
    if database is None:
        database = seeded_database()

    app = web.Application(client_max_size=config.max_body_size)
    app[DATABASE] = database
    app[CONFIG] = config

    app.add_routes([
        web.get('/', handle_default),
        web.get(RESOURCE_PREFIX + '{name:.*}', handle_get),
        web.post(RESOURCE_PREFIX + '{name:.*}', handle_put)])

    return app

async def serve(config: ServerConfig):
    ''' Main function that runs the web server '''

    app = make_app(config=config)

    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, config.host, config.port)

    await site.start()
    logging.info("Serving %i continents on http://%s:%i%s",
                 len(app[DATABASE]), config.host, config.port, RESOURCE_PREFIX)
    print("Waiting for Ctrl+C")

    try:
        while True:
            await asyncio.sleep(3600)
    finally:
        await runner.cleanup()
