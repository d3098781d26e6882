''' A simple client that reads or writes continents using HTTP '''

#pylint: disable=too-many-branches,too-many-statements

import argparse
import sys
import logging

from dataclasses import replace
from sys import argv
from requests import HTTPError, Response, Session

from ..constants import RESOURCE_PREFIX
from ..model import Continent, decode_continent, encode_continent
from ..seed import SEED_CONTINENTS

class RequestSender:
    ''' Maintains a connection to the continents server '''

    def __init__(self, address):
        self._address = address
        self._session = Session()

    @property
    def base_url(self) -> str:
        ''' The start of the URL we use for all requests '''
        return f"http://{self._address}{RESOURCE_PREFIX}"

    def create_raw(self, text: str) -> Response:
        ''' Post a body as-is and hand back the response without checking it '''
        return self._session.post(self.base_url, data=text.encode('utf-8'),
            headers={'Content-Type': 'application/json'}, timeout=2.0)

    def create(self, continent: Continent) -> Continent:
        ''' Create a new continent or replace an existing one '''
        result = self.create_raw(encode_continent(continent))
        result.raise_for_status()
        return decode_continent(result.text)

    def retrieve(self, name: str) -> Continent:
        ''' Read a continent from the server '''
        result = self._session.get(f"{self.base_url}{name}", timeout=2.0)
        result.raise_for_status()
        return decode_continent(result.text)

    def close(self):
        ''' Close the underlying HTTP session '''
        self._session.close()

def _print_continent(continent: Continent):
    print(encode_continent(continent))

def run_self_test(rsender: RequestSender):
    ''' Exercise create, read back, overwrite and unknown lookups '''

    zealandia = Continent('zealandia', 4900000, 0)
    assert rsender.create(zealandia) == zealandia
    assert rsender.retrieve('zealandia') == zealandia

    asia = rsender.retrieve('asia')
    bigger_asia = replace(asia, area=asia.area + 1)
    rsender.create(bigger_asia)
    assert rsender.retrieve('asia') == bigger_asia

    try:
        rsender.retrieve('mars')
    except HTTPError as err:
        assert 'mars' in err.response.text
    else:
        raise AssertionError("Lookup of an unknown continent succeeded")

def run():
    ''' Main logic of the client '''

    # Invoked by test runner?
    if argv[0] == "-c":
        argv[0] = "python"

    parser = argparse.ArgumentParser()
    parser.add_argument('mode', choices=['get', 'put', 'check-seed', 'test'])
    parser.add_argument('key', nargs='?', default=None,
            help="Name of the continent to fetch (get mode)")
    parser.add_argument('--server-address', default="127.0.0.1:8080")
    parser.add_argument('--name', type=str)
    parser.add_argument('--area', type=int)
    parser.add_argument('--population', type=int)
    parser.add_argument("--loglevel", default="info",
        help="Set the logging verbosity", choices=["warn", "debug", "info"])

    args = parser.parse_args()
    logging.basicConfig(level=args.loglevel.upper())

    rsender = RequestSender(args.server_address)

    try:
        match args.mode:
            case "get":
                if args.key is None:
                    print("ERROR: get needs the name of a continent")
                    sys.exit(1)

                _print_continent(rsender.retrieve(args.key))

            case "put":
                if args.name is None or args.area is None or args.population is None:
                    print("ERROR: put needs --name, --area and --population")
                    sys.exit(1)

                continent = Continent(args.name, args.area, args.population)
                _print_continent(rsender.create(continent))

            case "check-seed":
                for expected in SEED_CONTINENTS:
                    result = rsender.retrieve(expected.name)
                    if result != expected:
                        print(f'Invalid continent for key "{expected.name}". '
                              f'Expected {encode_continent(expected)}, '
                              f'but got {encode_continent(result)}.')
                        sys.exit(1)

                print(f"All {len(SEED_CONTINENTS)} seed continents are correct")

            case "test":
                print("Running test")
                run_self_test(rsender)
                print("Test successful!")

    except HTTPError as err:
        print(f"ERROR: Server answered {err.response.status_code}: {err.response.text}")
        sys.exit(1)
    finally:
        rsender.close()
