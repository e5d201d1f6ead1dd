"""Command channel client for the hybrid mount manager.

Turns a raw "run a command, get exit code and output" capability into a typed
client for configuration, module rules, and system/device status:

- codec: canonical JSON + hex payloads for command arguments
- config_service / modules / status / accent: the real operations
- mock: fixture-backed offline implementation
- facade: init_client() binds one of them for the process
"""

from api.client import Client, RealClient
from api.codec import canonical_json, decode_payload, encode_payload, hex_encode
from api.commands import CommandSet
from api.executor import ExecResult, Executor, SubprocessExecutor
from api.facade import init_client
from api.mock import MockClient

__all__ = [
    "Client",
    "RealClient",
    "MockClient",
    "init_client",
    "CommandSet",
    "ExecResult",
    "Executor",
    "SubprocessExecutor",
    "canonical_json",
    "decode_payload",
    "encode_payload",
    "hex_encode",
]
