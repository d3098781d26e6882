''' The continent record and its JSON representation '''

import json

from dataclasses import dataclass, asdict

FIELDS = ('name', 'area', 'population')

class ContinentDecodeError(ValueError):
    ''' A request body could not be turned into a continent '''

@dataclass(frozen=True)
class Continent:
    ''' A single continent: its name, land area in km² and population '''

    name: str
    area: int
    population: int

def encode_continent(continent: Continent) -> str:
    ''' Serialize a continent as a JSON object (name, area, population) '''
    return json.dumps(asdict(continent))

def _require_int(data: dict, field: str) -> int:
    value = data[field]

    # bool is a subclass of int, but "true" is not an area
    if isinstance(value, bool) or not isinstance(value, int):
        raise ContinentDecodeError(
            f'Field "{field}" must be an integer, got {json.dumps(value)}')

    return value

def decode_continent(text: str|bytes) -> Continent:
    ''' Parse a JSON document into a continent

    Bytes are decoded as UTF-8 first. Raises ContinentDecodeError if the
    text is not a JSON object with exactly the fields name (non-empty
    string), area and population (integers).
    '''

    if isinstance(text, bytes):
        try:
            text = text.decode('utf-8')
        except UnicodeDecodeError as err:
            raise ContinentDecodeError(f"Body is not valid UTF-8: {err}") from err

    # Oversized integer literals raise a plain ValueError, deep nesting a RecursionError
    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as err:
        raise ContinentDecodeError(f"Body is not valid JSON: {err}") from err

    if not isinstance(data, dict):
        raise ContinentDecodeError(
            f"Expected a JSON object, got {type(data).__name__}")

    missing = [field for field in FIELDS if field not in data]
    if missing:
        raise ContinentDecodeError(f"Missing field(s): {', '.join(missing)}")

    unknown = sorted(set(data) - set(FIELDS))
    if unknown:
        raise ContinentDecodeError(f"Unknown field(s): {', '.join(unknown)}")

    name = data['name']
    if not isinstance(name, str):
        raise ContinentDecodeError(
            f'Field "name" must be a string, got {json.dumps(name)}')
    if not name:
        raise ContinentDecodeError('Field "name" must not be empty')

    return Continent(name=name,
        area=_require_int(data, 'area'),
        population=_require_int(data, 'population'))
