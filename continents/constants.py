''' Fixed values shared by the server and the client '''

SERVER_PORT = 8080
SERVER_HOST = 'localhost'

RESOURCE_PREFIX = '/continents/'

JSON_CONTENT_TYPE = 'application/json; charset=UTF-8'
TEXT_CONTENT_TYPE = 'text/plain; charset=UTF-8'

# Status used when a continent is missing. 404 would be the usual choice.
NOT_FOUND_STATUS = 500

# Largest request body the server accepts (aiohttp's client_max_size)
MAX_BODY_SIZE = 1024**2
