''' Server configuration '''

import os

from dataclasses import dataclass, field

from .constants import SERVER_HOST, SERVER_PORT, NOT_FOUND_STATUS, MAX_BODY_SIZE

def _env_port() -> int:
    try:
        return int(os.environ.get("CONTINENTS_PORT", str(SERVER_PORT)))
    except ValueError:
        # 0 is rejected by validate() unless --port overrides it
        return 0

@dataclass
class ServerConfig:
    ''' Settings for a single continents server '''

    host: str = field(default_factory=lambda: os.environ.get("CONTINENTS_HOST", SERVER_HOST))
    port: int = field(default_factory=_env_port)

    # Status code for a lookup of an unknown continent
    not_found_status: int = NOT_FOUND_STATUS

    # Answer malformed bodies with 400 instead of letting the error escape
    reject_malformed: bool = False

    max_body_size: int = MAX_BODY_SIZE

    @classmethod
    def from_args(cls, args) -> 'ServerConfig':
        ''' Build the configuration from parsed command line arguments '''
        return cls(host=args.host, port=args.port,
            not_found_status=args.not_found_status,
            reject_malformed=args.reject_malformed,
            max_body_size=args.max_body_size)

    def validate(self) -> list[str]:
        ''' Returns a list of problems with this configuration (empty if valid) '''

        problems = []
        if not 0 < self.port < 65536:
            problems.append("Port must be in [1;65535] (check --port or CONTINENTS_PORT)")
        if not 100 <= self.not_found_status < 600:
            problems.append("Not-found status must be a valid HTTP status code")
        if self.max_body_size <= 0:
            problems.append("Maximum body size must be a positive number")

        return problems
